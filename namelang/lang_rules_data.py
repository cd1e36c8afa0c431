# ═════════════════════════════════════════════════════════════════════════════════
# BUILT-IN LANGUAGE GUESSING RULES
# ═════════════════════════════════════════════════════════════════════════════════
#
# One ordered rule table per name type. Each row is a triple:
#   (pattern, "+"-joined languages, accept_on_match)
#
# Rows are evaluated top to bottom against the lowercased word:
# - accept_on_match=True: a match keeps only the listed languages
# - accept_on_match=False: a match removes the listed languages
#
# The rows are reproduced as shipped with the Beider-Morse rule set. Two Ashkenazi
# rows carry malformed language tags ("german," and "ebrew") and one row ("gauz$")
# is duplicated. They are left untouched: a tag outside the vocabulary can only
# ever narrow the candidate set, so "fixing" it would change guesses.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# Ashkenazi Jewish surnames
ASHKENAZI_RULES = (
    ("zh", "polish+russian+german+english", True),
    ("eau", "french", True),
    ("[aoeiuäöü]h", "german", True),
    ("^vogel", "german,", True),
    ("vogel$", "german", True),
    ("witz", "german", True),
    ("tz$", "german+russian+english", True),
    ("^tz", "russian+english", True),
    ("güe", "spanish", True),
    ("güi", "spanish", True),
    ("ghe", "romanian", True),
    ("ghi", "romanian", True),
    ("vici$", "romanian", True),
    ("schi$", "romanian", True),
    ("chsch", "german", True),
    ("tsch", "german", True),
    ("ssch", "german", True),
    ("sch$", "german+russian", True),
    ("^sch", "german+russian", True),
    ("^rz", "polish", True),
    ("rz$", "polish+german", True),
    ("[^aoeiuäöü]rz", "polish", True),
    ("rz[^aoeiuäöü]", "polish", True),
    ("cki$", "polish", True),
    ("ska$", "polish", True),
    ("cka$", "polish", True),
    ("ue", "german+russian", True),
    ("ae", "german+russian+english", True),
    ("oe", "german+french+russian+english", True),
    ("th$", "german", True),
    ("^th", "german", True),
    ("th[^aoeiu]", "german", True),
    ("mann", "german", True),
    ("cz", "polish", True),
    ("cy", "polish", True),
    ("niew", "polish", True),
    ("stein", "german", True),
    ("heim$", "german", True),
    ("heimer$", "german", True),
    ("ii$", "russian", True),
    ("iy$", "russian", True),
    ("yy$", "russian", True),
    ("yi$", "russian", True),
    ("yj$", "russian", True),
    ("ij$", "russian", True),
    ("gaus$", "russian", True),
    ("gauz$", "russian", True),
    ("gauz$", "russian", True),
    ("goltz$", "russian", True),
    ("gol'tz$", "russian", True),
    ("golts$", "russian", True),
    ("gol'ts$", "russian", True),
    ("^goltz", "russian", True),
    ("^gol'tz", "russian", True),
    ("^golts", "russian", True),
    ("^gol'ts", "russian", True),
    ("gendler$", "russian", True),
    ("gejmer$", "russian", True),
    ("gejm$", "russian", True),
    ("geimer$", "russian", True),
    ("geim$", "russian", True),
    ("geymer", "russian", True),
    ("geym$", "russian", True),
    ("gof$", "russian", True),
    ("thal", "german", True),
    ("zweig", "german", True),
    ("ck$", "german+english", True),
    ("c$", "polish+romanian+hungarian", True),
    ("sz", "polish+hungarian", True),
    ("gue", "spanish+french", True),
    ("gui", "spanish+french", True),
    ("guy", "french", True),
    ("cs$", "hungarian", True),
    ("^cs", "hungarian", True),
    ("dzs", "hungarian", True),
    ("zs$", "hungarian", True),
    ("^zs", "hungarian", True),
    ("^wl", "polish", True),
    ("^wr", "polish+english+german", True),
    ("gy$", "hungarian", True),
    ("gy[aeou]", "hungarian", True),
    ("gy", "hungarian+russian", True),
    ("ly", "hungarian+russian+polish", True),
    ("ny", "hungarian+russian+polish", True),
    ("ty", "hungarian+russian+polish", True),
    ("â", "romanian+french", True),
    ("ă", "romanian", True),
    ("à", "french", True),
    ("ä", "german", True),
    ("á", "hungarian+spanish", True),
    ("ą", "polish", True),
    ("ć", "polish", True),
    ("ç", "french", True),
    ("ę", "polish", True),
    ("é", "french+hungarian+spanish", True),
    ("è", "french", True),
    ("ê", "french", True),
    ("í", "hungarian+spanish", True),
    ("î", "romanian+french", True),
    ("ł", "polish", True),
    ("ń", "polish", True),
    ("ñ", "spanish", True),
    ("ó", "polish+hungarian+spanish", True),
    ("ö", "german+hungarian", True),
    ("õ", "hungarian", True),
    ("ş", "romanian", True),
    ("ś", "polish", True),
    ("ţ", "romanian", True),
    ("ü", "german+hungarian", True),
    ("ù", "french", True),
    ("ű", "hungarian", True),
    ("ú", "hungarian+spanish", True),
    ("ź", "polish", True),
    ("ż", "polish", True),
    ("ß", "german", True),
    ("а", "cyrillic", True),
    ("ё", "cyrillic", True),
    ("о", "cyrillic", True),
    ("е", "cyrillic", True),
    ("и", "cyrillic", True),
    ("у", "cyrillic", True),
    ("ы", "cyrillic", True),
    ("э", "cyrillic", True),
    ("ю", "cyrillic", True),
    ("я", "cyrillic", True),
    ("א", "hebrew", True),
    ("ב", "hebrew", True),
    ("ג", "ebrew", True),
    ("ד", "hebrew", True),
    ("ה", "hebrew", True),
    ("ו", "hebrew", True),
    ("ז", "hebrew", True),
    ("ח", "hebrew", True),
    ("ט", "hebrew", True),
    ("י", "hebrew", True),
    ("כ", "hebrew", True),
    ("ל", "hebrew", True),
    ("מ", "hebrew", True),
    ("נ", "hebrew", True),
    ("ס", "hebrew", True),
    ("ע", "hebrew", True),
    ("פ", "hebrew", True),
    ("צ", "hebrew", True),
    ("ק", "hebrew", True),
    ("ר", "hebrew", True),
    ("ש", "hebrew", True),
    ("ת", "hebrew", True),
    ("a", "cyrillic+hebrew", False),
    ("o", "cyrillic+hebrew", False),
    ("e", "cyrillic+hebrew", False),
    ("i", "cyrillic+hebrew", False),
    ("y", "cyrillic+hebrew+romanian", False),
    ("u", "cyrillic+hebrew", False),
    ("v[^aoeiuäüö]", "german", False),
    ("y[^aoeiu]", "german", False),
    ("c[^aohk]", "german", False),
    ("dzi", "german+english+french", False),
    ("ou", "german", False),
    ("aj", "german+english+french", False),
    ("ej", "german+english+french", False),
    ("oj", "german+english+french", False),
    ("uj", "german+english+french", False),
    ("k", "romanian", False),
    ("v", "polish", False),
    ("ky", "polish", False),
    ("eu", "russian+polish", False),
    ("w", "french+romanian+spanish+hungarian+russian", False),
    ("kie", "french+spanish", False),
    ("gie", "french+romanian+spanish", False),
    ("q", "hungarian+polish+russian+romanian", False),
    ("sch", "hungarian+polish+french+spanish", False),
    ("^h", "russian", False),
)

# Generic (no ethnic or religious assumption)
GENERIC_RULES = (
    ("^o’", "english", True),
    ("^o'", "english", True),
    ("^mc", "english", True),
    ("^fitz", "english", True),
    ("ceau", "french+romanian", True),
    ("eau", "romanian", True),
    ("eau$", "french", True),
    ("eaux$", "french", True),
    ("ault$", "french", True),
    ("oult$", "french", True),
    ("eux$", "french", True),
    ("eix$", "french", True),
    ("glou$", "greeklatin", True),
    ("uu", "dutch", True),
    ("tx", "spanish", True),
    ("witz", "german", True),
    ("tz$", "german+russian+english", True),
    ("^tz", "russian+english", True),
    ("poulos$", "greeklatin", True),
    ("pulos$", "greeklatin", True),
    ("iou", "greeklatin", True),
    ("sj$", "dutch", True),
    ("^sj", "dutch", True),
    ("güe", "spanish", True),
    ("güi", "spanish", True),
    ("ghe", "romanian+greeklatin", True),
    ("ghi", "romanian+greeklatin", True),
    ("escu$", "romanian", True),
    ("esco$", "romanian", True),
    ("vici$", "romanian", True),
    ("schi$", "romanian", True),
    ("ii$", "russian", True),
    ("iy$", "russian", True),
    ("yy$", "russian", True),
    ("yi$", "russian", True),
    ("^rz", "polish", True),
    ("rz$", "polish+german", True),
    ("[bcdfgklmnpstwz]rz", "polish", True),
    ("rz[bcdfghklmnpstw]", "polish", True),
    ("cki$", "polish", True),
    ("ska$", "polish", True),
    ("cka$", "polish", True),
    ("ae", "german+russian+english", True),
    ("oe", "german+french+russian+english+dutch", True),
    ("th$", "german+english", True),
    ("^th", "german+english+greeklatin", True),
    ("mann", "german", True),
    ("cz", "polish", True),
    ("cy", "polish+greeklatin", True),
    ("niew", "polish", True),
    ("etti$", "italian", True),
    ("eti$", "italian", True),
    ("ati$", "italian", True),
    ("ato$", "italian", True),
    ("[aoei]no$", "italian", True),
    ("[aoei]ni$", "italian", True),
    ("esi$", "italian", True),
    ("oli$", "italian", True),
    ("field$", "english", True),
    ("stein", "german", True),
    ("heim$", "german", True),
    ("heimer$", "german", True),
    ("thal", "german", True),
    ("zweig", "german", True),
    ("[aeou]h", "german", True),
    ("äh", "german", True),
    ("öh", "german", True),
    ("üh", "german", True),
    ("[ln]h[ao]$", "portuguese", True),
    ("[ln]h[aou]", "portuguese+french+german+dutch+czech+spanish+turkish", True),
    ("chsch", "german", True),
    ("tsch", "german", True),
    ("sch$", "german+russian", True),
    ("^sch", "german+russian", True),
    ("ck$", "german+english", True),
    ("c$", "polish+romanian+hungarian+czech+turkish", True),
    ("sz", "polish+hungarian", True),
    ("cs$", "hungarian", True),
    ("^cs", "hungarian", True),
    ("dzs", "hungarian", True),
    ("zs$", "hungarian", True),
    ("^zs", "hungarian", True),
    ("^wl", "polish", True),
    ("^wr", "polish+english+german+dutch", True),
    ("gy$", "hungarian", True),
    ("gy[aeou]", "hungarian", True),
    ("gy", "hungarian+russian+french+greeklatin", True),
    ("guy", "french", True),
    ("gu[ei]", "spanish+french+portuguese", True),
    ("gu[ao]", "spanish+portuguese", True),
    ("gi[aou]", "italian+greeklatin", True),
    ("ly", "hungarian+russian+polish+greeklatin", True),
    ("ny", "hungarian+russian+polish+spanish+greeklatin", True),
    ("ty", "hungarian+russian+polish+greeklatin", True),
    ("ć", "polish", True),
    ("ç", "french+spanish+portuguese+turkish", True),
    ("č", "czech", True),
    ("ď", "czech", True),
    ("ğ", "turkish", True),
    ("ł", "polish", True),
    ("ń", "polish", True),
    ("ñ", "spanish", True),
    ("ň", "czech", True),
    ("ř", "czech", True),
    ("ś", "polish", True),
    ("ş", "romanian+turkish", True),
    ("š", "czech", True),
    ("ţ", "romanian", True),
    ("ť", "czech", True),
    ("ź", "polish", True),
    ("ż", "polish", True),
    ("ß", "german", True),
    ("ä", "german", True),
    ("á", "hungarian+spanish+portuguese+czech+greeklatin", True),
    ("â", "romanian+french+portuguese", True),
    ("ă", "romanian", True),
    ("ą", "polish", True),
    ("à", "portuguese", True),
    ("ã", "portuguese", True),
    ("ę", "polish", True),
    ("é", "french+hungarian+czech+greeklatin", True),
    ("è", "french+spanish+italian", True),
    ("ê", "french", True),
    ("ě", "czech", True),
    ("ê", "french+portuguese", True),
    ("í", "hungarian+spanish+portuguese+czech+greeklatin", True),
    ("î", "romanian+french", True),
    ("ı", "turkish", True),
    ("ó", "polish+hungarian+spanish+italian+portuguese+czech+greeklatin", True),
    ("ö", "german+hungarian+turkish", True),
    ("ô", "french+portuguese", True),
    ("õ", "portuguese+hungarian", True),
    ("ò", "italian+spanish", True),
    ("ű", "hungarian", True),
    ("ú", "hungarian+spanish+portuguese+czech+greeklatin", True),
    ("ü", "german+hungarian+spanish+portuguese+turkish", True),
    ("ù", "french", True),
    ("ů", "czech", True),
    ("ý", "czech+greeklatin", True),
    ("а", "cyrillic", True),
    ("ё", "cyrillic", True),
    ("о", "cyrillic", True),
    ("е", "cyrillic", True),
    ("и", "cyrillic", True),
    ("у", "cyrillic", True),
    ("ы", "cyrillic", True),
    ("э", "cyrillic", True),
    ("ю", "cyrillic", True),
    ("я", "cyrillic", True),
    ("α", "greek", True),
    ("ε", "greek", True),
    ("η", "greek", True),
    ("ι", "greek", True),
    ("ο", "greek", True),
    ("υ", "greek", True),
    ("ω", "greek", True),
    ("ا", "arabic", True),
    ("ب", "arabic", True),
    ("ت", "arabic", True),
    ("ث", "arabic", True),
    ("ج", "arabic", True),
    ("ح", "arabic", True),
    ("خ'", "arabic", True),
    ("د", "arabic", True),
    ("ذ", "arabic", True),
    ("ر", "arabic", True),
    ("ز", "arabic", True),
    ("س", "arabic", True),
    ("ش", "arabic", True),
    ("ص", "arabic", True),
    ("ض", "arabic", True),
    ("ط", "arabic", True),
    ("ظ", "arabic", True),
    ("ع", "arabic", True),
    ("غ", "arabic", True),
    ("ف", "arabic", True),
    ("ق", "arabic", True),
    ("ك", "arabic", True),
    ("ل", "arabic", True),
    ("م", "arabic", True),
    ("ن", "arabic", True),
    ("ه", "arabic", True),
    ("و", "arabic", True),
    ("ي", "arabic", True),
    ("آ", "arabic", True),
    ("إ", "arabic", True),
    ("أ", "arabic", True),
    ("ؤ", "arabic", True),
    ("ئ", "arabic", True),
    ("لا", "arabic", True),
    ("א", "hebrew", True),
    ("ב", "hebrew", True),
    ("ג", "hebrew", True),
    ("ד", "hebrew", True),
    ("ה", "hebrew", True),
    ("ו", "hebrew", True),
    ("ז", "hebrew", True),
    ("ח", "hebrew", True),
    ("ט", "hebrew", True),
    ("י", "hebrew", True),
    ("כ", "hebrew", True),
    ("ל", "hebrew", True),
    ("מ", "hebrew", True),
    ("נ", "hebrew", True),
    ("ס", "hebrew", True),
    ("ע", "hebrew", True),
    ("פ", "hebrew", True),
    ("צ", "hebrew", True),
    ("ק", "hebrew", True),
    ("ר", "hebrew", True),
    ("ש", "hebrew", True),
    ("ת", "hebrew", True),
    ("a", "cyrillic+hebrew+greek+arabic", False),
    ("o", "cyrillic+hebrew+greek+arabic", False),
    ("e", "cyrillic+hebrew+greek+arabic", False),
    ("i", "cyrillic+hebrew+greek+arabic", False),
    ("y", "cyrillic+hebrew+greek+arabic+romanian+dutch", False),
    ("u", "cyrillic+hebrew+greek+arabic", False),
    ("j", "italian", False),
    ("j[^aoeiuy]", "french+spanish+portuguese+greeklatin", False),
    ("g", "czech", False),
    ("k", "romanian+spanish+portuguese+french+italian", False),
    ("q", "hungarian+polish+russian+romanian+czech+dutch+turkish+greeklatin", False),
    ("v", "polish", False),
    ("w", "french+romanian+spanish+hungarian+russian+czech+turkish+greeklatin", False),
    ("x", "czech+hungarian+dutch+turkish", False),
    ("dj", "spanish+turkish", False),
    ("v[^aoeiu]", "german", False),
    ("y[^aoeiu]", "german", False),
    ("c[^aohk]", "german", False),
    ("dzi", "german+english+french+turkish", False),
    ("ou", "german", False),
    ("a[eiou]", "turkish", False),
    ("ö[eaiou]", "turkish", False),
    ("ü[eaiou]", "turkish", False),
    ("e[aiou]", "turkish", False),
    ("i[aeou]", "turkish", False),
    ("o[aieu]", "turkish", False),
    ("u[aieo]", "turkish", False),
    ("aj", "german+english+french+dutch", False),
    ("ej", "german+english+french+dutch", False),
    ("oj", "german+english+french+dutch", False),
    ("uj", "german+english+french+dutch", False),
    ("eu", "russian+polish", False),
    ("ky", "polish", False),
    ("kie", "french+spanish+greeklatin", False),
    ("gie", "portuguese+romanian+spanish+greeklatin", False),
    ("ch[aou]", "italian", False),
    ("ch", "turkish", False),
    ("son$", "german", False),
    ("sc[ei]", "french", False),
    ("sch", "hungarian+polish+french+spanish", False),
    ("^h", "russian", False),
)

# Sephardic Jewish surnames
SEPHARDIC_RULES = (
    ("eau", "french", True),
    ("ou", "french", True),
    ("gni", "italian+french", True),
    ("tx", "spanish", True),
    ("tj", "spanish", True),
    ("gy", "french", True),
    ("guy", "french", True),
    ("sh", "spanish+portuguese", True),
    ("lh", "portuguese", True),
    ("nh", "portuguese", True),
    ("ny", "spanish", True),
    ("gue", "spanish+french", True),
    ("gui", "spanish+french", True),
    ("gia", "italian", True),
    ("gie", "italian", True),
    ("gio", "italian", True),
    ("giu", "italian", True),
    ("ñ", "spanish", True),
    ("â", "portuguese+french", True),
    ("á", "portuguese+spanish", True),
    ("à", "portuguese", True),
    ("ã", "portuguese", True),
    ("ê", "french+portuguese", True),
    ("í", "portuguese+spanish", True),
    ("î", "french", True),
    ("ô", "french+portuguese", True),
    ("õ", "portuguese", True),
    ("ò", "italian+spanish", True),
    ("ú", "portuguese+spanish", True),
    ("ù", "french", True),
    ("ü", "portuguese+spanish", True),
    ("א", "hebrew", True),
    ("ב", "hebrew", True),
    ("ג", "hebrew", True),
    ("ד", "hebrew", True),
    ("ה", "hebrew", True),
    ("ו", "hebrew", True),
    ("ז", "hebrew", True),
    ("ח", "hebrew", True),
    ("ט", "hebrew", True),
    ("י", "hebrew", True),
    ("כ", "hebrew", True),
    ("ל", "hebrew", True),
    ("מ", "hebrew", True),
    ("נ", "hebrew", True),
    ("ס", "hebrew", True),
    ("ע", "hebrew", True),
    ("פ", "hebrew", True),
    ("צ", "hebrew", True),
    ("ק", "hebrew", True),
    ("ר", "hebrew", True),
    ("ש", "hebrew", True),
    ("ת", "hebrew", True),
    ("a", "hebrew", False),
    ("o", "hebrew", False),
    ("e", "hebrew", False),
    ("i", "hebrew", False),
    ("y", "hebrew", False),
    ("u", "hebrew", False),
    ("kh", "spanish", False),
    ("gua", "italian", False),
    ("guo", "italian", False),
    ("ç", "italian", False),
    ("cha", "italian", False),
    ("cho", "italian", False),
    ("chu", "italian", False),
    ("j", "italian", False),
    ("dj", "spanish", False),
    ("sce", "french", False),
    ("sci", "french", False),
    ("ó", "french", False),
    ("è", "portuguese", False),
)


def _check_rule_rows(table_name, rows):
    """Fail at import time if a row is not a (str, str, bool) triple."""
    for index, row in enumerate(rows):
        if len(row) != 3:
            raise ValueError(f"{table_name}[{index}] has {len(row)} fields, expected 3: {row!r}")
        pattern, languages, accept_on_match = row
        if not isinstance(pattern, str) or not pattern:
            raise ValueError(f"{table_name}[{index}] has an empty or non-string pattern: {row!r}")
        if not isinstance(languages, str) or not languages:
            raise ValueError(f"{table_name}[{index}] has an empty or non-string language list: {row!r}")
        if not isinstance(accept_on_match, bool):
            raise ValueError(f"{table_name}[{index}] has a non-boolean accept flag: {row!r}")


_check_rule_rows("ASHKENAZI_RULES", ASHKENAZI_RULES)
_check_rule_rows("GENERIC_RULES", GENERIC_RULES)
_check_rule_rows("SEPHARDIC_RULES", SEPHARDIC_RULES)

# Keyed by NameType.value ("ash", "gen", "sep")
BUILTIN_RULES = MappingProxyType(
    {
        "ash": ASHKENAZI_RULES,
        "gen": GENERIC_RULES,
        "sep": SEPHARDIC_RULES,
    }
)
