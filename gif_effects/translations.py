"""Countdown unit labels keyed by language code."""

from types import MappingProxyType
from typing import Mapping

_TABLE = {
    "ar": {"days": "أيام", "hours": "ساعات", "minutes": "دقائق", "seconds": "ثواني"},
    "bg": {"days": "дни", "hours": "часа", "minutes": "минути", "seconds": "секунди"},
    "cs": {"days": "dny", "hours": "hodiny", "minutes": "minuty", "seconds": "sekundy"},
    "da": {"days": "dage", "hours": "timer", "minutes": "minutter", "seconds": "sekunder"},
    "de": {"days": "Tage", "hours": "Stunden", "minutes": "Minuten", "seconds": "Sekunden"},
    "el": {"days": "ημέρες", "hours": "ώρες", "minutes": "λεπτά", "seconds": "δευτερόλεπτα"},
    "en": {"days": "days", "hours": "hours", "minutes": "minutes", "seconds": "seconds"},
    "es": {"days": "días", "hours": "horas", "minutes": "minutos", "seconds": "segundos"},
    "fa": {"days": "روز", "hours": "ساعت", "minutes": "دقیقه", "seconds": "ثانیه"},
    "fi": {"days": "päivää", "hours": "tuntia", "minutes": "minuuttia", "seconds": "sekuntia"},
    "fr": {"days": "jours", "hours": "heures", "minutes": "minutes", "seconds": "secondes"},
    "he": {"days": "ימים", "hours": "שעות", "minutes": "דקות", "seconds": "שניות"},
    "hi": {"days": "दिन", "hours": "घंटे", "minutes": "मिनट", "seconds": "सेकंड"},
    "hu": {"days": "nap", "hours": "óra", "minutes": "perc", "seconds": "másodperc"},
    "it": {"days": "giorni", "hours": "ore", "minutes": "minuti", "seconds": "secondi"},
    "ja": {"days": "日", "hours": "時間", "minutes": "分", "seconds": "秒"},
    "ko": {"days": "일", "hours": "시간", "minutes": "분", "seconds": "초"},
    "lt": {"days": "dienos", "hours": "valandos", "minutes": "minutės", "seconds": "sekundės"},
    "nl": {"days": "dagen", "hours": "uren", "minutes": "minuten", "seconds": "seconden"},
    "no": {"days": "dager", "hours": "timer", "minutes": "minutter", "seconds": "sekunder"},
    "pl": {"days": "dni", "hours": "godziny", "minutes": "minuty", "seconds": "sekundy"},
    "pt": {"days": "dias", "hours": "horas", "minutes": "minutos", "seconds": "segundos"},
    "ro": {"days": "zile", "hours": "ore", "minutes": "minute", "seconds": "secunde"},
    "ru": {"days": "дни", "hours": "часы", "minutes": "минуты", "seconds": "секунды"},
    "sk": {"days": "dni", "hours": "hodiny", "minutes": "minúty", "seconds": "sekundy"},
    "sv": {"days": "dagar", "hours": "timmar", "minutes": "minuter", "seconds": "sekunder"},
    "th": {"days": "วัน", "hours": "ชั่วโมง", "minutes": "นาที", "seconds": "วินาที"},
    "tr": {"days": "gün", "hours": "saat", "minutes": "dakika", "seconds": "saniye"},
    "uk": {"days": "дні", "hours": "години", "minutes": "хвилини", "seconds": "секунди"},
    "vi": {"days": "ngày", "hours": "giờ", "minutes": "phút", "seconds": "giây"},
    "zh": {"days": "天", "hours": "小时", "minutes": "分钟", "seconds": "秒"},
}

TRANSLATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {lang: MappingProxyType(labels) for lang, labels in _TABLE.items()}
)

SUPPORTED_LANGUAGES = frozenset(TRANSLATIONS)


def translate(key: str, lang: str) -> str:
    """Return the label for ``key`` in ``lang``, or ``key`` itself when unknown."""
    return TRANSLATIONS.get(lang, {}).get(key, key)
