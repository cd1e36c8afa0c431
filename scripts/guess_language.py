"""
Guess the source languages of name words from the command line.
"""

import sys
import logging
import argparse

from namelang.errors import LanguageRulesError
from namelang.lang import (
    build_registry,
    explain_guess,
    guess_language,
    guess_languages,
    load_from_resource,
    normalize_text,
)
from namelang.languages import Languages, NameType, SomeLanguages

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Guess the languages a name word originates from.")
    parser.add_argument("words", nargs="+", help="Name words to guess, one guess per word.")
    parser.add_argument(
        "--name_type",
        type=str,
        default=NameType.GENERIC.value,
        choices=[name_type.value for name_type in NameType],
        help="Naming convention whose rules and vocabulary apply.",
    )
    parser.add_argument(
        "--rules_path", type=str, default=None, help="Custom rule file to use instead of the bundled rules."
    )
    parser.add_argument("--explain", action="store_true", help="Print the candidate set after every matching rule.")
    parser.add_argument("--verbose", action="store_true", help="Log table construction.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(message)s")
    name_type = NameType(args.name_type)

    try:
        if args.rules_path:
            table = load_from_resource(args.rules_path, Languages.get_instance(name_type))
        else:
            table = build_registry()[name_type]
    except LanguageRulesError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    for word in args.words:
        text = normalize_text(word)
        candidates = guess_languages(table, text)
        shown = "+".join(candidates) if isinstance(candidates, SomeLanguages) else repr(candidates)
        print(f"{word}\t{guess_language(table, text)}\t{shown}")
        if args.explain:
            for step in explain_guess(table, text):
                if step.matched:
                    print(f"    {step.rule!r} -> {'+'.join(sorted(step.candidates)) or '(none)'}")
