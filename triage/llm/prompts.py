from pets.species import get_species_info

SYSTEM_PROMPT = """You are a veterinary triage assistant helping pet owners understand possible causes of their pet's symptoms. You are NOT a veterinarian and cannot diagnose conditions.

You provide guidance for ALL types of pets including:
- Mammals: Dogs, cats, rabbits, hamsters, guinea pigs, ferrets
- Birds: Parrots, parakeets, cockatiels, canaries, finches, chickens
- Reptiles: Turtles, tortoises, snakes, lizards, geckos, bearded dragons, iguanas
- Fish: Goldfish, betta fish, tropical fish, koi
- Amphibians: Frogs, axolotls, salamanders

Your role is to:
1. Interpret the symptoms described for the SPECIFIC type of animal
2. Suggest possible causes (never definitive diagnoses)
3. Assess severity and urgency ACCURATELY based on the symptoms AND the species
4. Recommend safe home actions when appropriate for that species
5. Guide when to seek veterinary care (noting if a specialist is needed)
6. Always include safety disclaimers

SPECIES-SPECIFIC CONSIDERATIONS:

For BIRDS:
- Birds hide illness well - any obvious symptoms are often serious
- Fluffed feathers, sitting at cage bottom, or changes in droppings are concerning
- Respiratory symptoms (tail bobbing, open-mouth breathing) are urgent
- Egg binding in females is an emergency

For REPTILES:
- Temperature regulation issues can cause many symptoms
- Metabolic bone disease is common in calcium-deficient diets
- Respiratory infections show as mouth gaping, wheezing, mucus
- Impaction from substrates is a common issue

For FISH:
- Water quality is the #1 cause of fish illness
- Ich (white spots), fin rot, and swim bladder issues are common
- Gasping at surface indicates oxygen or water quality problems
- Quarantine new fish to prevent disease spread

For SMALL MAMMALS (rabbits, hamsters, guinea pigs):
- GI stasis in rabbits is an emergency
- Dental issues are very common
- Wet tail in hamsters is serious
- Respiratory issues spread quickly

SEVERITY CLASSIFICATION - Choose the MOST APPROPRIATE category:

"Emergency" - Use ONLY for life-threatening situations:
  - Difficulty breathing in any species
  - Collapse, unconsciousness, or unresponsiveness
  - Severe bleeding that won't stop
  - Suspected poisoning
  - Seizures
  - Egg binding (birds/reptiles)
  - GI stasis with no fecal output for 12+ hours (rabbits)
  - Fish floating sideways or upside down
  - Prolapse (any species)

"Urgent" - Needs vet within 24 hours:
  - Not eating for 24+ hours (12 hours for small mammals/birds)
  - Bird with fluffed feathers and lethargy
  - Reptile with mouth gaping or wheezing
  - Visible injuries or wounds
  - Bloody droppings or discharge
  - Swelling or lumps

"Non-Urgent" - Schedule vet visit within a few days:
  - Mild appetite decrease but still eating some
  - Minor skin issues, shedding problems (reptiles)
  - Slight behavior changes
  - Feather plucking (birds) without skin damage
  - Minor fin damage (fish)

"Monitor" - Safe to observe at home:
  - Occasional sneezing without discharge
  - Slightly less active but still eating/drinking normally
  - Minor behavioral changes
  - Normal shedding (reptiles)
  - Temporary water cloudiness (fish tanks)

IMPORTANT: Consider the species' normal behaviors and health patterns. What's minor for a dog might be serious for a bird or rabbit.

You must respond in valid JSON format with this exact structure:
{
  "possibleCauses": ["cause 1", "cause 2", "cause 3"],
  "severityCategory": "Emergency",
  "recommendations": ["action 1", "action 2", "action 3"],
  "whenToVisitVet": "specific guidance on when to seek veterinary care",
  "disclaimer": "This is not a diagnosis. The information provided is for educational purposes only and should not replace professional veterinary advice. If you are concerned about your pet's health, please consult a qualified veterinarian."
}

For severityCategory, use EXACTLY one of these values: "Emergency", "Urgent", "Non-Urgent", or "Monitor".
"""

# espèces pesées en grammes (les poissons sont mesurés en cm)
GRAM_WEIGHED_SPECIES = ("hamster", "guinea_pig", "parakeet", "canary", "finch")
SMALL_MAMMALS = ("rabbit", "guinea_pig", "hamster", "ferret")


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'s' if n > 1 else ''}"


def format_age(months: int) -> str:
    if months >= 12:
        return _plural(months // 12, "year")
    return _plural(months, "month")


def age_note(species: str, vet_type: str, months: int) -> str:
    """Note d'urgence pour les très jeunes ou très vieux animaux ("" sinon)."""
    if species == "dog":
        if months < 6:
            return "NOTE: This is a young puppy - may need elevated urgency"
        if months >= 84:
            return "NOTE: This is a senior dog - may need elevated urgency"
    elif species == "cat":
        if months < 6:
            return "NOTE: This is a young kitten - may need elevated urgency"
        if months >= 132:
            return "NOTE: This is a senior cat - may need elevated urgency"
    elif vet_type == "avian":
        if months < 6:
            return "NOTE: This is a young bird - may need elevated urgency"
    elif vet_type == "exotic":
        if months < 3:
            return "NOTE: This is a young small mammal - may need elevated urgency"
    return ""


def weight_unit(species: str, vet_type: str) -> str:
    if vet_type == "aquatic":
        return "cm"
    if species in GRAM_WEIGHED_SPECIES:
        return "grams"
    return "kg"


def _format_number(value) -> str:
    # 12.0 -> "12", 4.5 -> "4.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def species_reminder(species: str, vet_type: str) -> str:
    if vet_type == "avian":
        return "Remember: Birds hide illness well. Visible symptoms often indicate the condition has progressed."
    if vet_type == "reptile":
        return "Remember: Consider husbandry factors (temperature, humidity, lighting, diet) as potential causes."
    if vet_type == "aquatic":
        return (
            "Remember: Water quality is the most common cause of fish health issues. "
            "Consider ammonia, nitrite, pH, and temperature."
        )
    if species in SMALL_MAMMALS:
        return "Remember: Small mammals have fast metabolisms. Not eating for even 12 hours can be serious."
    return ""


def build_user_prompt(symptoms: str, pet_info: dict) -> str:
    species = pet_info["species"]
    info = get_species_info(species)
    age = int(pet_info.get("age") or 0)

    lines = [
        "Pet Information:",
        f"- Name: {pet_info.get('name') or 'Unknown'}",
        f"- Species: {info.label} ({species})",
        f"- Animal Type: {info.vet_type}",
        f"- Breed/Variety: {pet_info.get('breed') or 'Unknown/Mixed'}",
        f"- Age: {format_age(age)}",
    ]

    weight = pet_info.get("weight")
    if weight:
        lines.append(f"- Weight/Size: {_format_number(weight)} {weight_unit(species, info.vet_type)}")

    note = age_note(species, info.vet_type, age)
    if note:
        lines.append(f"- {note}")

    if pet_info.get("known_conditions"):
        lines.append(f"- Known conditions: {', '.join(pet_info['known_conditions'])}")
    if pet_info.get("allergies"):
        lines.append(f"- Allergies/Sensitivities: {', '.join(pet_info['allergies'])}")
    if pet_info.get("medications"):
        lines.append(f"- Current medications/treatments: {', '.join(pet_info['medications'])}")

    prompt = "\n".join(lines)
    prompt += f"\n\nReported Symptoms:\n{symptoms}"

    reminder = species_reminder(species, info.vet_type)
    if reminder:
        prompt += f"\n\n{reminder}"

    prompt += (
        "\n\nAnalyze these symptoms and respond with JSON only. "
        "Choose the severity category that BEST matches the symptoms for this specific species - "
        f"consider what's normal vs. concerning for a {info.label}."
    )
    return prompt


def with_image_context(prompt: str, image_count: int) -> str:
    if image_count <= 0:
        return prompt
    return (
        f"{prompt}\n\nI have also attached {image_count} image(s) showing the symptoms. "
        "Please analyze these images as part of your assessment."
    )
