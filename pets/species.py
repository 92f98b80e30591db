"""
Référentiel des espèces prises en charge.

Chaque espèce a un code (stocké sur Pet.species), un libellé, une icône et un
type de vétérinaire (vet_type) utilisé pour adapter le prompt et orienter
l'utilisateur vers le bon spécialiste.
"""
from typing import Dict, List, NamedTuple


class SpeciesInfo(NamedTuple):
    value: str
    label: str
    icon: str
    vet_type: str  # "small animal" | "exotic" | "avian" | "reptile" | "aquatic" | "general"


ANIMAL_CATEGORIES: Dict[str, Dict] = {
    "mammal": {
        "label": "Mammals",
        "species": [
            SpeciesInfo("dog", "Dog", "🐕", "small animal"),
            SpeciesInfo("cat", "Cat", "🐈", "small animal"),
            SpeciesInfo("rabbit", "Rabbit", "🐇", "exotic"),
            SpeciesInfo("hamster", "Hamster", "🐹", "exotic"),
            SpeciesInfo("guinea_pig", "Guinea Pig", "🐹", "exotic"),
            SpeciesInfo("ferret", "Ferret", "🦡", "exotic"),
        ],
    },
    "bird": {
        "label": "Birds",
        "species": [
            SpeciesInfo("parrot", "Parrot", "🦜", "avian"),
            SpeciesInfo("parakeet", "Parakeet/Budgie", "🐦", "avian"),
            SpeciesInfo("cockatiel", "Cockatiel", "🐦", "avian"),
            SpeciesInfo("canary", "Canary", "🐤", "avian"),
            SpeciesInfo("finch", "Finch", "🐦", "avian"),
            SpeciesInfo("chicken", "Chicken", "🐔", "avian"),
        ],
    },
    "reptile": {
        "label": "Reptiles",
        "species": [
            SpeciesInfo("turtle", "Turtle/Tortoise", "🐢", "reptile"),
            SpeciesInfo("snake", "Snake", "🐍", "reptile"),
            SpeciesInfo("lizard", "Lizard", "🦎", "reptile"),
            SpeciesInfo("gecko", "Gecko", "🦎", "reptile"),
            SpeciesInfo("bearded_dragon", "Bearded Dragon", "🦎", "reptile"),
            SpeciesInfo("iguana", "Iguana", "🦎", "reptile"),
        ],
    },
    "fish": {
        "label": "Fish",
        "species": [
            SpeciesInfo("goldfish", "Goldfish", "🐠", "aquatic"),
            SpeciesInfo("betta", "Betta Fish", "🐟", "aquatic"),
            SpeciesInfo("tropical_fish", "Tropical Fish", "🐠", "aquatic"),
            SpeciesInfo("koi", "Koi", "🐟", "aquatic"),
        ],
    },
    "amphibian": {
        "label": "Amphibians",
        "species": [
            SpeciesInfo("frog", "Frog", "🐸", "exotic"),
            SpeciesInfo("axolotl", "Axolotl", "🦎", "aquatic"),
            SpeciesInfo("salamander", "Salamander", "🦎", "exotic"),
        ],
    },
}

ALL_SPECIES: List[SpeciesInfo] = [
    sp for category in ANIMAL_CATEGORIES.values() for sp in category["species"]
]

_BY_VALUE = {sp.value: sp for sp in ALL_SPECIES}

# Pour la recherche d'un vétérinaire adapté côté front
VET_TYPES = {
    "small animal": {
        "label": "Small Animal Vet",
        "search_term": "veterinarian",
        "description": "General practice for dogs and cats",
    },
    "exotic": {
        "label": "Exotic Animal Vet",
        "search_term": "exotic pet veterinarian",
        "description": "Specializes in rabbits, rodents, ferrets, and unusual pets",
    },
    "avian": {
        "label": "Avian Vet",
        "search_term": "avian bird veterinarian",
        "description": "Specializes in birds",
    },
    "reptile": {
        "label": "Reptile Vet",
        "search_term": "reptile veterinarian",
        "description": "Specializes in reptiles and amphibians",
    },
    "aquatic": {
        "label": "Aquatic Vet",
        "search_term": "fish aquatic veterinarian",
        "description": "Specializes in fish and aquatic animals",
    },
    "general": {
        "label": "General Vet",
        "search_term": "veterinarian",
        "description": "General veterinary practice",
    },
}


def get_species_info(value: str) -> SpeciesInfo:
    # espèce hors référentiel -> vétérinaire généraliste
    return _BY_VALUE.get(value) or SpeciesInfo(value, value, "🐾", "general")


def species_choices():
    return [(sp.value, sp.label) for sp in ALL_SPECIES]
