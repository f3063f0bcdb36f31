from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from tabulate import tabulate

from .backend_registry import get_backend_status, list_backends
from .backend_spec import SPELLER, STEMMER
from .errors import ConfigurationError, DictionaryLoadError, LemmapipeError
from .lemmatizer import Lemmatizer, new
from .storage import (
    get_config_file,
    get_default_dictionary,
    get_default_language,
    get_default_speller_backend,
    get_default_stemmer_backend,
    get_default_tagset,
    get_lemmapipe_home,
    read_config,
    write_config,
)
from .tagset import default_registry


def _add_lemmatizer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--dict", dest="dict_path", default=None,
                        help="Dictionary file (relative paths resolve against the lemmapipe home)")
    parser.add_argument("--language", default=None,
                        help="BCP 47 language tag, e.g. en-US (default: from config)")
    parser.add_argument("--tagset", default=None,
                        help="Map dictionary tags from this tagset to the Universal Tagset")
    parser.add_argument("--stem", action="store_true", help="Enable the stemming fallback")
    parser.add_argument("--spell", action="store_true", help="Enable the spell-correction fallback")
    parser.add_argument("--concurrent", action="store_true",
                        help="Use one engine per CPU instead of a single serialized engine")
    parser.add_argument("--stemmer-backend", default=None, help="Stemmer engine backend name")
    parser.add_argument("--speller-backend", default=None, help="Speller engine backend name")


def _create_lemmatizer(args: argparse.Namespace, *, stem: Optional[bool] = None) -> Lemmatizer:
    return new(
        args.dict_path or get_default_dictionary(),
        args.language or get_default_language(),
        args.tagset if args.tagset is not None else get_default_tagset(),
        args.stem if stem is None else stem,
        args.spell,
        args.concurrent,
        stemmer_backend=args.stemmer_backend or get_default_stemmer_backend(),
        speller_backend=args.speller_backend or get_default_speller_backend(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lemmapipe",
        description="Dictionary-first lemmatizer with stemming and spell-checking fallbacks",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    lemma_parser = subparsers.add_parser("lemma", help="Look up the lemma of words")
    lemma_parser.add_argument("word", help="Inflected word")
    lemma_parser.add_argument("pos", help="Part-of-speech tag")
    lemma_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    _add_lemmatizer_arguments(lemma_parser)

    stem_parser = subparsers.add_parser("stem", help="Stem words, skipping the dictionary")
    stem_parser.add_argument("words", nargs="+", help="Words to stem")
    _add_lemmatizer_arguments(stem_parser)

    info_parser = subparsers.add_parser("info", help="Show tagsets, backends and tag mappings")
    info_subparsers = info_parser.add_subparsers(dest="info_command")
    info_subparsers.add_parser("tagsets", help="List registered tagset mappings")
    info_subparsers.add_parser("backends", help="List stemmer/speller backends and their status")
    tags_parser = info_subparsers.add_parser("tags", help="Show a tagset's mapping table")
    tags_parser.add_argument("--tagset", required=True, help="Tagset name, e.g. penn")
    tags_parser.add_argument("--language", default="en", help="Language tag (default: en)")

    config_parser = subparsers.add_parser("config", help="Configure lemmapipe settings")
    config_parser.add_argument("--show", action="store_true", help="Show current configuration")
    config_parser.add_argument("--set-default-dictionary", metavar="PATH")
    config_parser.add_argument("--set-default-language", metavar="TAG")
    config_parser.add_argument("--set-default-tagset", metavar="NAME")
    config_parser.add_argument("--set-default-stemmer-backend", metavar="NAME")
    config_parser.add_argument("--set-default-speller-backend", metavar="NAME")

    return parser


def run_lemma(args: argparse.Namespace) -> int:
    with _create_lemmatizer(args) as lemmatizer:
        result = lemmatizer.lemma(args.word, args.pos)
    error = str(result.error) if result.error else None
    if args.json:
        print(json.dumps({"lemma": result.lemma, "found": result.found, "error": error}, ensure_ascii=False))
    else:
        print(result.lemma, result.found, error or "")
    return 0 if result.error is None else 1


def run_stem(args: argparse.Namespace) -> int:
    with _create_lemmatizer(args, stem=True) as lemmatizer:
        for word in args.words:
            print(lemmatizer.stem(word))
    return 0


def run_info(args: argparse.Namespace) -> int:
    if args.info_command == "tagsets":
        rows = [(name, language, len(default_registry.table(name, language)))
                for name, language in default_registry.names()]
        print(tabulate(rows, headers=["Tagset", "Language", "Tags"]))
        return 0
    if args.info_command == "backends":
        rows = []
        for kind in (STEMMER, SPELLER):
            for name, spec in list_backends(kind).items():
                status = get_backend_status(name)
                rows.append((name, kind, status["status"], spec.description, status["install_hint"]))
        print(tabulate(rows, headers=["Backend", "Kind", "Status", "Description", "Install"]))
        return 0
    if args.info_command == "tags":
        table = default_registry.table(args.tagset, args.language)
        print(tabulate(sorted(table.items()), headers=["Tag", "Universal"]))
        return 0
    print("[lemmapipe] Choose one of: tagsets, backends, tags", file=sys.stderr)
    return 1


def run_config(args: argparse.Namespace) -> int:
    updates = {}
    for key in ("dictionary", "language", "tagset", "stemmer_backend", "speller_backend"):
        value = getattr(args, f"set_default_{key}")
        if value is not None:
            updates[f"default_{key}"] = value
    if updates:
        write_config(updates)
        for key, value in updates.items():
            print(f"[lemmapipe] {key} set to: {value}")
    if args.show or not updates:
        print(f"Home directory: {get_lemmapipe_home()}")
        print(f"Config file:    {get_config_file()}")
        config = read_config()
        if config:
            print(tabulate(sorted(config.items()), headers=["Setting", "Value"]))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    handlers = {
        "lemma": run_lemma,
        "stem": run_stem,
        "info": run_info,
        "config": run_config,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except ConfigurationError as exc:
        print(f"[lemmapipe] Configuration error: {exc}", file=sys.stderr)
        return 2
    except DictionaryLoadError as exc:
        print(f"[lemmapipe] {exc}", file=sys.stderr)
        return 1
    except LemmapipeError as exc:
        print(f"[lemmapipe] Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
