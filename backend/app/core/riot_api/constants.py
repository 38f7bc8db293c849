"""Riot API constants and enum definitions."""

from enum import Enum


class Region(str, Enum):
    """Riot API regions for regional routing."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


class Platform(str, Enum):
    """Riot API platforms for platform routing."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    PH2 = "ph2"
    RU = "ru"
    SG2 = "sg2"
    TH2 = "th2"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"


class QueueType(int, Enum):
    """Queue ids the web client knows by name."""

    RANKED_SOLO_5X5 = 420
    RANKED_FLEX_5X5 = 440
    ARAM = 450
    NORMAL_DRAFT_5X5 = 400
    NORMAL_BLIND_PICK_5X5 = 430
    ARENA = 1700


# Display labels are part of the client contract; keep them verbatim.
GAME_MODE_LABELS = {
    QueueType.RANKED_SOLO_5X5: "Ranked Solo/Duo",
    QueueType.RANKED_FLEX_5X5: "Ranked Flex",
    QueueType.ARAM: "ARAM",
    QueueType.NORMAL_DRAFT_5X5: "Normal Draft",
    QueueType.NORMAL_BLIND_PICK_5X5: "Normal Blind",
    QueueType.ARENA: "Arena",
}

DEFAULT_GAME_MODE_LABEL = "Custom Game"

# Upstream status code that is retried with a fixed backoff
RETRYABLE_STATUS_CODE = 502

# Short display label per platform, used in summoner responses
PLATFORM_LABELS = {
    Platform.BR1: "BR",
    Platform.EUN1: "EUNE",
    Platform.EUW1: "EUW",
    Platform.JP1: "JP",
    Platform.KR: "KR",
    Platform.LA1: "LAN",
    Platform.LA2: "LAS",
    Platform.NA1: "NA",
    Platform.OC1: "OCE",
    Platform.PH2: "PH",
    Platform.RU: "RU",
    Platform.SG2: "SG",
    Platform.TH2: "TH",
    Platform.TR1: "TR",
    Platform.TW2: "TW",
    Platform.VN2: "VN",
}
