"""
Namegen CLI - Command-line interface for the name generator.

Usage:
    namegen list <source>                  List grammars in a source
    namegen validate <source>              Parse a source and show pool sizes
    namegen generate <source> [options]    Generate names
    namegen builtin                        List bundled grammar files

<source> is a file path or the name of a bundled grammar file.
"""

import argparse
import random
import sys

from .config import load_settings
from .log import configure_logging
from .grammar.errors import NamegenError


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Namegen - Grammar-driven fictional name generator",
        prog="namegen",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # List command
    list_parser = subparsers.add_parser("list", help="List grammars in a source")
    list_parser.add_argument("source", help="Grammar file path or bundled grammar name")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Parse a grammar source")
    validate_parser.add_argument("source", help="Grammar file path or bundled grammar name")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate names")
    generate_parser.add_argument("source", help="Grammar file path or bundled grammar name")
    generate_parser.add_argument("--grammar", "-g", help="Grammar name (default: first in source)")
    generate_parser.add_argument("--count", "-n", type=int, default=10, help="Number of names")
    generate_parser.add_argument("--rule", "-r", help="Custom generation rule, e.g. '$s$v$e'")
    generate_parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    generate_parser.add_argument("--max-attempts", type=int, help="Give up after this many retries")

    # Builtin command
    subparsers.add_parser("builtin", help="List bundled grammar files")

    args = parser.parse_args(argv)

    commands = {
        "list": cmd_list,
        "validate": cmd_validate,
        "generate": cmd_generate,
        "builtin": cmd_builtin,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        command(args, settings)
    except (NamegenError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


def _load(source, settings, seed=None, max_attempts=None):
    from .engine_core import NameGenerator

    generator = NameGenerator(
        rng=random.Random(seed if seed is not None else settings.seed),
        max_attempts=max_attempts if max_attempts is not None else settings.max_attempts,
    )
    names = generator.load_file(source)
    return generator, names


def cmd_list(args, settings):
    """List grammars defined in a source."""
    _, names = _load(args.source, settings)
    for name in names:
        print(name)


def cmd_validate(args, settings):
    """Parse a source and report its grammars."""
    generator, names = _load(args.source, settings)

    print(f"Source: {args.source}")
    print(f"Grammars: {len(names)}")
    for name in names:
        grammar = generator.get_grammar(name)
        sizes = ", ".join(
            f"{key}={size}" for key, size in grammar.pool_sizes().items() if size
        )
        print(f"  - {name}: {sizes or 'empty'}")
        if not grammar.rules:
            print(f"    warning: no rules, '{name}' cannot generate names")


def cmd_generate(args, settings):
    """Generate names from a grammar."""
    if args.count < 1:
        print("Error: --count must be >= 1")
        sys.exit(1)
    if args.max_attempts is not None and args.max_attempts < 1:
        print("Error: --max-attempts must be >= 1")
        sys.exit(1)

    generator, names = _load(args.source, settings, args.seed, args.max_attempts)
    if not names:
        print(f"Error: No grammars defined in {args.source}")
        sys.exit(1)

    grammar = args.grammar or names[0]
    for name in generator.generate_many(grammar, args.count, rule=args.rule):
        print(name)


def cmd_builtin(args, settings):
    """List bundled grammar files."""
    from .grammars import list_bundled

    for filename in list_bundled():
        print(filename)


if __name__ == "__main__":
    main()
