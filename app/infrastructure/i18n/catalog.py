"""Static catalog of supported interface languages.

Entries are kept in their historical insertion order. Header sniffing walks
descriptors in this order, so reordering entries changes which language wins
when several patterns match the same header value.
"""

from types import MappingProxyType
from typing import Mapping

from infrastructure.i18n.models import RTL_CODES, LocaleDescriptor

__all__ = [
    "FALLBACK_CODE",
    "LANGUAGE_CATALOG",
    "RTL_CODES",
    "fallback_language",
    "get_catalog_language",
]


def _entry(
    code: str,
    english_name: str,
    native_name: str,
    match_pattern: str,
    external_locale_tag: str,
) -> LocaleDescriptor:
    return LocaleDescriptor(
        code=code,
        english_name=english_name,
        native_name=native_name,
        match_pattern=match_pattern,
        external_locale_tag=external_locale_tag,
    )


_LANGUAGES = (
    _entry("af", "Afrikaans", "", r"af|afrikaans", ""),
    _entry("am", "Amharic", "አማርኛ", r"am|amharic", ""),
    _entry("ar", "Arabic", "العربية", r"ar(?![-_]ly)([-_][a-z]{2,3})?|arabic", "ar_AE"),
    _entry(
        "ar_LY",
        "Arabic (Libya)",
        "ليبي",
        r"ar[_-]ly|arabic (libya)|libian arabic",
        "ar_LY",
    ),
    _entry("az", "Azerbaijani", "Azərbaycanca", r"az|azerbaijani", ""),
    _entry("bn", "Bangla", "বাংলা", r"bn|bangla", ""),
    _entry("be", "Belarusian", "Беларуская", r"be|belarusian", "be_BY"),
    _entry(
        "be@latin",
        "Belarusian (latin)",
        "Biełaruskaja",
        r"be[-_]lat|be@latin|belarusian latin",
        "",
    ),
    _entry("ber", "Berber", "Tamaziɣt", r"ber|berber", ""),
    _entry("bg", "Bulgarian", "Български", r"bg|bulgarian", "bg_BG"),
    _entry("bs", "Bosnian", "Bosanski", r"bs|bosnian", ""),
    _entry("br", "Breton", "Brezhoneg", r"br|breton", ""),
    _entry("brx", "Bodo", "बड़ो", r"brx|bodo", ""),
    _entry("ca", "Catalan", "Català", r"ca|catalan", "ca_ES"),
    _entry("ckb", "Sorani", "سۆرانی", r"ckb|sorani", ""),
    _entry("cs", "Czech", "Čeština", r"cs|czech", "cs_CZ"),
    _entry("cy", "Welsh", "Cymraeg", r"cy|welsh", ""),
    _entry("da", "Danish", "Dansk", r"da|danish", "da_DK"),
    _entry("de", "German", "Deutsch", r"de|german", "de_DE"),
    _entry("el", "Greek", "Ελληνικά", r"el|greek", ""),
    _entry("en", "English", "", r"en(?![-_]gb)([-_][a-z]{2,3})?|english", "en_US"),
    _entry(
        "en_GB",
        "English (United Kingdom)",
        "",
        r"en[_-]gb|english (United Kingdom)",
        "en_GB",
    ),
    _entry("enm", "English (Middle)", "", r"enm|english (middle)", ""),
    _entry("eo", "Esperanto", "Esperanto", r"eo|esperanto", ""),
    _entry("es", "Spanish", "Español", r"es|spanish", "es_ES"),
    _entry("et", "Estonian", "Eesti", r"et|estonian", "et_EE"),
    _entry("eu", "Basque", "Euskara", r"eu|basque", "eu_ES"),
    _entry("fa", "Persian", "فارسی", r"fa|persian", ""),
    _entry("fi", "Finnish", "Suomi", r"fi|finnish", "fi_FI"),
    _entry("fil", "Filipino", "Pilipino", r"fil|filipino", ""),
    _entry("fr", "French", "Français", r"fr|french", "fr_FR"),
    _entry("fy", "Frisian", "Frysk", r"fy|frisian", ""),
    _entry("gl", "Galician", "Galego", r"gl|galician", "gl_ES"),
    _entry("gu", "Gujarati", "ગુજરાતી", r"gu|gujarati", "gu_IN"),
    _entry("he", "Hebrew", "עברית", r"he|hebrew", "he_IL"),
    _entry("hi", "Hindi", "हिन्दी", r"hi|hindi", "hi_IN"),
    _entry("hr", "Croatian", "Hrvatski", r"hr|croatian", "hr_HR"),
    _entry("hu", "Hungarian", "Magyar", r"hu|hungarian", "hu_HU"),
    _entry("hy", "Armenian", "Հայերէն", r"hy|armenian", ""),
    _entry("ia", "Interlingua", "", r"ia|interlingua", ""),
    _entry("id", "Indonesian", "Bahasa Indonesia", r"id|indonesian", "id_ID"),
    _entry("ig", "Igbo", "Asụsụ Igbo", r"ig|igbo", ""),
    _entry("it", "Italian", "Italiano", r"it|italian", "it_IT"),
    _entry("ja", "Japanese", "日本語", r"ja|japanese", "ja_JP"),
    _entry("ko", "Korean", "한국어", r"ko|korean", "ko_KR"),
    _entry("ka", "Georgian", "ქართული", r"ka|georgian", ""),
    _entry("kab", "Kabylian", "Taqbaylit", r"kab|kabylian", ""),
    _entry("kk", "Kazakh", "Қазақ", r"kk|kazakh", ""),
    _entry("km", "Khmer", "ខ្មែរ", r"km|khmer", ""),
    _entry("kn", "Kannada", "ಕನ್ನಡ", r"kn|kannada", ""),
    _entry("ksh", "Colognian", "Kölsch", r"ksh|colognian", ""),
    _entry("ku", "Kurdish", "کوردی", r"ku|kurdish", ""),
    _entry("ky", "Kyrgyz", "Кыргызча", r"ky|kyrgyz", ""),
    _entry("li", "Limburgish", "Lèmbörgs", r"li|limburgish", ""),
    _entry("lt", "Lithuanian", "Lietuvių", r"lt|lithuanian", "lt_LT"),
    _entry("lv", "Latvian", "Latviešu", r"lv|latvian", "lv_LV"),
    _entry("mk", "Macedonian", "Macedonian", r"mk|macedonian", "mk_MK"),
    _entry("ml", "Malayalam", "Malayalam", r"ml|malayalam", ""),
    _entry("mn", "Mongolian", "Монгол", r"mn|mongolian", "mn_MN"),
    _entry("ms", "Malay", "Bahasa Melayu", r"ms|malay", "ms_MY"),
    _entry("my", "Burmese", "မြန်မာ", r"my|burmese", ""),
    _entry("ne", "Nepali", "नेपाली", r"ne|nepali", ""),
    _entry("nb", "Norwegian", "Norsk", r"nb|norwegian", "nb_NO"),
    _entry("nn", "Norwegian Nynorsk", "Nynorsk", r"nn|nynorsk", "nn_NO"),
    _entry("nl", "Dutch", "Nederlands", r"nl|dutch", "nl_NL"),
    _entry("pa", "Punjabi", "ਪੰਜਾਬੀ", r"pa|punjabi", ""),
    _entry("pl", "Polish", "Polski", r"pl|polish", "pl_PL"),
    _entry(
        "pt",
        "Portuguese",
        "Português",
        r"pt(?![-_]br)([-_][a-z]{2,3})?|portuguese",
        "pt_PT",
    ),
    _entry(
        "pt_BR",
        "Portuguese (Brazil)",
        "Português (Brasil)",
        r"pt[-_]br|portuguese (brazil)",
        "pt_BR",
    ),
    _entry("rcf", "Réunion Creole", "Kréol", r"rcf|creole (reunion)", ""),
    _entry("ro", "Romanian", "Română", r"ro|romanian", "ro_RO"),
    _entry("ru", "Russian", "Русский", r"ru|russian", "ru_RU"),
    _entry("si", "Sinhala", "සිංහල", r"si|sinhala", ""),
    _entry("sk", "Slovak", "Slovenčina", r"sk|slovak", "sk_SK"),
    _entry("sl", "Slovenian", "Slovenščina", r"sl|slovenian", "sl_SI"),
    _entry("sq", "Albanian", "Shqip", r"sq|albanian", "sq_AL"),
    _entry(
        "sr@latin",
        "Serbian (latin)",
        "Srpski",
        r"sr[-_]lat|sr@latin|serbian latin",
        "sr_YU",
    ),
    _entry("sr", "Serbian", "Српски", r"sr|serbian", "sr_YU"),
    _entry("sv", "Swedish", "Svenska", r"sv|swedish", "sv_SE"),
    _entry("ta", "Tamil", "தமிழ்", r"ta|tamil", "ta_IN"),
    _entry("te", "Telugu", "తెలుగు", r"te|telugu", "te_IN"),
    _entry("th", "Thai", "ภาษาไทย", r"th|thai", "th_TH"),
    _entry("tk", "Turkmen", "Türkmençe", r"tk|turkmen", ""),
    _entry("tr", "Turkish", "Türkçe", r"tr|turkish", "tr_TR"),
    _entry("tt", "Tatarish", "Tatarça", r"tt|tatarish", ""),
    _entry(
        "tzm",
        "Central Atlas Tamazight",
        "Tamaziɣt",
        r"tzm|central atlas tamazight",
        "",
    ),
    _entry("ug", "Uyghur", "ئۇيغۇرچە", r"ug|uyghur", ""),
    _entry("uk", "Ukrainian", "Українська", r"uk|ukrainian", "uk_UA"),
    _entry("ur", "Urdu", "اُردوُ", r"ur|urdu", "ur_PK"),
    _entry(
        "uz@latin",
        "Uzbek (latin)",
        "O‘zbekcha",
        r"uz[-_]lat|uz@latin|uzbek-latin",
        "",
    ),
    _entry(
        "uz",
        "Uzbek (cyrillic)",
        "Ўзбекча",
        r"uz[-_]cyr|uz@cyrillic|uzbek-cyrillic",
        "",
    ),
    _entry("vi", "Vietnamese", "Tiếng Việt", r"vi|vietnamese", "vi_VN"),
    _entry("vls", "Flemish", "West-Vlams", r"vls|flemish", ""),
    # only TW and HK use traditional Chinese, others (CN, SG, MY) use
    # simplified Chinese
    _entry(
        "zh_TW",
        "Chinese traditional",
        "中文",
        r"zh[-_](tw|hk)|chinese traditional",
        "zh_TW",
    ),
    _entry(
        "zh_CN",
        "Chinese simplified",
        "中文",
        r"zh(?![-_](tw|hk))([-_][a-z]{2,3})?|chinese simplified",
        "zh_CN",
    ),
)

LANGUAGE_CATALOG: Mapping[str, LocaleDescriptor] = MappingProxyType(
    {language.code.lower(): language for language in _LANGUAGES}
)

FALLBACK_CODE = "en"


def get_catalog_language(code: str) -> LocaleDescriptor | None:
    """Return the cataloged descriptor for ``code`` (case-insensitive)."""
    return LANGUAGE_CATALOG.get(code.lower())


def fallback_language() -> LocaleDescriptor:
    """Return the English descriptor that is always present in the catalog."""
    return LANGUAGE_CATALOG[FALLBACK_CODE]
