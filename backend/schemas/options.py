from enum import Enum


class AgeGroup(str, Enum):
    """Target listener age band."""
    THIRTIES = "30s"
    FORTIES = "40s"
    FIFTIES = "50s"
    SIXTIES = "60s"


class ScriptFormat(str, Enum):
    """Broadcast format the script is written for."""
    RADIO_STORY = "radio-story"                 # Listener letter read on air
    NARRATED_VIDEO = "narrated-video"           # YouTube narration over stills
    COUNSELING_TALK = "counseling-talk"         # Host answers the listener
    BITTERSWEET_COMEDY = "bittersweet-comedy"   # Funny but sad
    POETIC_JUSTICE = "poetic-justice"           # The wrongdoer gets what they deserve
    FAMILY_LOVE = "family-love"


class ScriptLength(str, Enum):
    """Target runtime."""
    S20 = "20s"
    S30 = "30s"
    S45 = "45s"
    S60 = "60s"
    M2_3 = "2-3min"
    M5_7 = "5-7min"
    M10 = "10min"
    M15 = "15min"
    M30 = "30min"


class Tone(str, Enum):
    WARM = "warm"
    PLAIN = "plain"
    WITTY = "witty"
    FIRM = "firm"
    TEARFUL = "tearful"
    TRIUMPHANT = "triumphant"


class Intensity(str, Enum):
    """How hard the story is allowed to hit."""
    MILD = "mild"
    REALISTIC = "realistic"
    STRONG = "strong"


class InputMode(str, Enum):
    """How the story premise was supplied."""
    PASTE = "paste"         # Full original text
    SUMMARY = "summary"     # Characters / conflict / twist only
    AUTO = "auto"           # Keywords, the model fills in the rest


class TitleMode(str, Enum):
    SHORTS = "shorts"       # 15-60s vertical video
    LONG = "long"           # 3-10min long-form


class Emotion(str, Enum):
    REGRET = "regret"
    ANGER = "anger"
    EMPTINESS = "emptiness"
    COMFORT = "comfort"
    REVERSAL = "reversal"
    CATHARSIS = "catharsis"
    NOSTALGIA = "nostalgia"
    MOVED = "moved"
    GRIEF = "grief"


class Relationship(str, Enum):
    SPOUSE = "spouse"
    PARENT = "parent"
    CHILD = "child"
    BOSS = "boss"
    COWORKER = "coworker"
    FRIEND = "friend"
    HUSBANDS_FAMILY = "husbands-family"
    WIFES_FAMILY = "wifes-family"
    SIBLING = "sibling"


# id -> label, used as the title generator's category
TOPIC_PRESETS = {
    "family": "Family (couples / parents / children)",
    "work": "Work (bosses / coworkers / retirement)",
    "health": "Health and aging",
    "money": "Money and household finances",
    "divorce": "After divorce or bereavement",
    "family_ext": "Extended family conflict (in-laws / siblings)",
    "relation": "Relationships in general",
    "identity": "Identity and feeling invisible",
    "dream": "Dreams and a second life",
    "care": "Caregiving",
    "values": "Values and generation gaps",
    "secret": "Secrets and guilt",
    "love": "Dating and remarriage",
    "parenting": "Parenting and childbirth",
    "inner": "Inner life (burnout / emptiness / self-esteem)",
    "justice": "Poetic justice (payback / cutting ties)",
}

EMOTION_CURVES = [
    "loss-to-remorse",
    "conflict-to-reconciliation",
    "isolation-to-recovery",
    "craving-recognition",
    "nostalgia",
    "payback",
]

# Canned override filters for title regeneration
TITLE_FILTER_PRESETS = {
    "catharsis-only": "Favor catharsis and payback outcomes only.",
    "tears-only": "Favor tearful, moving outcomes only.",
    "ten-more": "Ten more in a similar tone to the previous batch.",
}
