"""
Tests du constructeur de prompt
"""
from triage.llm.prompts import (
    SYSTEM_PROMPT, build_user_prompt, format_age, with_image_context,
)


def _pet(**overrides):
    info = {
        "name": "Rex",
        "species": "dog",
        "breed": "Labrador",
        "age": 36,
        "weight": 28.5,
        "known_conditions": [],
        "allergies": [],
        "medications": [],
    }
    info.update(overrides)
    return info


def test_prompt_is_deterministic():
    pet = _pet(known_conditions=["Diabetes"], allergies=["Beef"], medications=["Insulin"])
    first = build_user_prompt("Vomiting twice today", pet)
    second = build_user_prompt("Vomiting twice today", dict(pet))
    assert first == second


def test_prompt_contains_pet_information():
    prompt = build_user_prompt("Limping on the left leg", _pet(
        known_conditions=["Hip dysplasia", "Arthritis"],
        allergies=["Chicken"],
        medications=["Carprofen"],
    ))
    assert "- Name: Rex" in prompt
    assert "- Species: Dog (dog)" in prompt
    assert "- Animal Type: small animal" in prompt
    assert "- Breed/Variety: Labrador" in prompt
    assert "- Age: 3 years" in prompt
    assert "- Weight/Size: 28.5 kg" in prompt
    assert "- Known conditions: Hip dysplasia, Arthritis" in prompt
    assert "- Allergies/Sensitivities: Chicken" in prompt
    assert "- Current medications/treatments: Carprofen" in prompt
    assert "Reported Symptoms:\nLimping on the left leg" in prompt
    assert "concerning for a Dog." in prompt


def test_empty_lists_and_missing_weight_are_omitted():
    prompt = build_user_prompt("Sneezing", _pet(weight=None, breed=None))
    assert "Weight/Size" not in prompt
    assert "Known conditions" not in prompt
    assert "Allergies" not in prompt
    assert "medications" not in prompt
    assert "- Breed/Variety: Unknown/Mixed" in prompt


def test_format_age():
    assert format_age(1) == "1 month"
    assert format_age(5) == "5 months"
    assert format_age(12) == "1 year"
    assert format_age(30) == "2 years"


def test_age_notes_for_dogs_and_cats():
    assert "young puppy" in build_user_prompt("x", _pet(age=4))
    assert "senior dog" in build_user_prompt("x", _pet(age=84))
    assert "NOTE:" not in build_user_prompt("x", _pet(age=36))
    assert "young kitten" in build_user_prompt("x", _pet(species="cat", age=2))
    assert "senior cat" in build_user_prompt("x", _pet(species="cat", age=132))
    assert "NOTE:" not in build_user_prompt("x", _pet(species="cat", age=131))


def test_age_notes_for_birds_and_exotics():
    assert "young bird" in build_user_prompt("x", _pet(species="parrot", age=5))
    assert "young small mammal" in build_user_prompt("x", _pet(species="rabbit", age=2))
    assert "NOTE:" not in build_user_prompt("x", _pet(species="rabbit", age=3))


def test_weight_units_depend_on_species():
    assert "- Weight/Size: 120 grams" in build_user_prompt("x", _pet(species="hamster", weight=120.0))
    assert "- Weight/Size: 8 cm" in build_user_prompt("x", _pet(species="goldfish", weight=8))
    assert "- Weight/Size: 2 kg" in build_user_prompt("x", _pet(species="rabbit", weight=2))


def test_species_reminders():
    assert "Birds hide illness well" in build_user_prompt("x", _pet(species="canary"))
    assert "husbandry factors" in build_user_prompt("x", _pet(species="bearded_dragon"))
    fish = build_user_prompt("x", _pet(species="betta"))
    assert "Water quality" in fish and "ammonia, nitrite, pH" in fish
    assert "fast metabolisms" in build_user_prompt("x", _pet(species="guinea_pig"))
    assert "Remember:" not in build_user_prompt("x", _pet(species="dog"))


def test_unknown_species_falls_back_to_general():
    prompt = build_user_prompt("x", _pet(species="capybara"))
    assert "- Species: capybara (capybara)" in prompt
    assert "- Animal Type: general" in prompt


def test_image_context_only_when_images_attached():
    assert with_image_context("prompt", 0) == "prompt"
    assert "attached 2 image(s)" in with_image_context("prompt", 2)


def test_system_prompt_lists_the_four_categories():
    for category in ("Emergency", "Urgent", "Non-Urgent", "Monitor"):
        assert f'"{category}"' in SYSTEM_PROMPT
