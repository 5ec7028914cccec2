from __future__ import annotations

import argparse
import logging
import sys

from typing import List, Optional

from .config import Settings
from .entropy import strength_label
from .password_generator import GeneratedPassword, GenerationRequest, PasswordGenerator

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for lengths and counts."""
    try:
        number = int(value)
    except ValueError:
        msg = f'{value!r} is not an integer'
        raise argparse.ArgumentTypeError(msg) from None
    if number < 0:
        msg = f'{number} must not be negative'
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the command line parser, using ``settings`` for defaults."""
    parser = argparse.ArgumentParser(
        prog='randompass',
        description='Generate random passwords and estimate their entropy.',
    )
    parser.add_argument(
        '-l', '--length',
        type=_non_negative_int,
        default=settings.default_length,
        help=f'password length (default {settings.default_length})',
    )
    parser.add_argument(
        '-n', '--count',
        type=_non_negative_int,
        default=1,
        help='number of passwords to generate (default 1)',
    )
    for name, label in (
        ('upper', 'uppercase letters'),
        ('lower', 'lowercase letters'),
        ('digits', 'digits'),
        ('special', 'special symbols'),
    ):
        parser.add_argument(
            f'--{name}',
            action=argparse.BooleanOptionalAction,
            default=True,
            help=f'include {label}',
        )
    parser.add_argument(
        '--show-entropy',
        action='store_true',
        help='print the entropy estimate after each password',
    )
    parser.add_argument(
        '-i', '--interactive',
        action='store_true',
        help='prompt for every option instead of reading flags',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='enable debug logging',
    )
    return parser


def ask_bool(prompt: str, default: bool = True) -> bool:
    """Ask a yes/no question; an empty answer picks ``default``."""
    answer = input(prompt).strip().lower()
    if not answer:
        return default
    return answer in {'y', 'yes', 'true', '1'}


def prompt_request(settings: Settings) -> GenerationRequest:
    """Interactively build a GenerationRequest."""
    length_input = input(f'Length (default {settings.default_length}): ').strip()
    length = settings.default_length

    if length_input:
        requested = settings.parse_length(length_input)

        if requested is None:
            print(f'[!] {length_input!r} is not a valid length, using {length}.')
        else:
            length = requested

    return GenerationRequest(
        use_upper=ask_bool('Include uppercase letters? [Y/n] '),
        use_lower=ask_bool('Include lowercase letters? [Y/n] '),
        use_digits=ask_bool('Include digits? [Y/n] '),
        use_special=ask_bool('Include special symbols? [Y/n] '),
        length=length,
    )


def show_password(password: GeneratedPassword, show_entropy: bool) -> None:
    """Print a password and, optionally, its strength."""
    password.display()

    if show_entropy:
        print(f'Entropy: {password.entropy:.2f} bits ({strength_label(password.entropy)})')


def action_generate_password(
    generator: PasswordGenerator,
    request: GenerationRequest,
    count: int,
    show_entropy: bool,
) -> None:
    """Generate ``count`` passwords for ``request`` and print them."""
    if not request.selected_classes():
        print('[!] No character class selected.', file=sys.stderr)

    for _ in range(count):
        show_password(generator.generate(request), show_entropy)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.length > settings.max_length:
        parser.error(f'length must be at most {settings.max_length}')

    if args.interactive:
        try:
            request = prompt_request(settings)
        except (EOFError, KeyboardInterrupt):
            print('\n[!] Aborted.', file=sys.stderr)
            return 1
    else:
        request = GenerationRequest(
            use_upper=args.upper,
            use_lower=args.lower,
            use_digits=args.digits,
            use_special=args.special,
            length=args.length,
        )

    logger.debug('Request: %s, count=%d', request, args.count)
    action_generate_password(PasswordGenerator(), request, args.count, args.show_entropy)
    return 0


if __name__ == '__main__':
    sys.exit(main())
