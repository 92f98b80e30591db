# triage/logic/emergency.py
from typing import List

# expressions qui doivent afficher le bandeau "urgence" sans attendre l'IA
EMERGENCY_KEYWORDS = [
    "not breathing",
    "can't breathe",
    "difficulty breathing",
    "unconscious",
    "unresponsive",
    "seizure",
    "convulsion",
    "poisoning",
    "poison",
    "ate poison",
    "hit by car",
    "severe bleeding",
    "won't stop bleeding",
    "collapse",
    "collapsed",
    "choking",
    "bloated stomach",
    "twisted stomach",
    # oiseaux
    "fluffed up and lethargic",
    "sitting at bottom of cage",
    # reptiles
    "mouth gaping",
    "not moving for days",
    # poissons
    "floating sideways",
    "gasping at surface",
]


def detect_emergency_keywords(text: str) -> List[str]:
    txt = (text or "").lower().replace("’", "'")
    return [kw for kw in EMERGENCY_KEYWORDS if kw in txt]
