"""PassGrade command-line interface.

Usage examples:
    python -m passgrade check mypassword
    python -m passgrade check -f passwords.txt --tips 3
    python -m passgrade check --json --min-score 60 "Tr0ub4dor&3xyz!!"
"""

import argparse
import json
import logging
import sys

from passgrade import DISPLAY_TIPS, LABELS, evaluate

logger = logging.getLogger(__name__)

BAR_CELLS = 20

# Terminal stand-ins for the band colours: red, yellow, amber, green, blue.
_ANSI = dict(zip(LABELS, ("\033[31m", "\033[33m", "\033[93m", "\033[32m", "\033[34m")))
_RESET = "\033[0m"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgrade",
        description="Grade password strength offline.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Grade one or more passwords")
    check_p.add_argument("passwords", nargs="*", help="Passwords to grade")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a UTF-8 file (one per line, empty lines skipped)",
    )
    check_p.add_argument(
        "-t", "--tips", type=int, default=DISPLAY_TIPS,
        help=f"Maximum tips shown per password (default: {DISPLAY_TIPS})",
    )
    check_p.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON array",
    )
    check_p.add_argument(
        "--min-score", type=int, default=None,
        help="Exit with status 1 if any password scores below this",
    )
    check_p.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output",
    )
    check_p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "check":
        return _cmd_check(args)

    parser.print_help()
    return 0


def _read_passwords(path: str) -> list[str]:
    with open(path, encoding="utf-8") as f:
        lines = (line.rstrip("\r\n") for line in f)
        return [line for line in lines if line]


def _bar(score: int) -> str:
    filled = score * BAR_CELLS // 100
    return "#" * filled + "-" * (BAR_CELLS - filled)


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        try:
            passwords.extend(_read_passwords(args.file))
        except OSError as exc:
            print(f"Error: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as exc:
            print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
        logger.debug("Read passwords from %s", args.file)

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    results = [evaluate(pwd) for pwd in passwords]
    logger.debug("Graded %d password(s)", len(results))

    if args.json:
        payload = []
        for pwd, r in zip(passwords, results):
            item = r.to_dict()
            item["feedback"] = list(r.top_tips(args.tips))
            payload.append({"password": pwd, **item})
        print(json.dumps(payload, indent=2))
    else:
        color = not args.no_color and sys.stdout.isatty()
        for pwd, r in zip(passwords, results):
            label = r.label
            if color:
                label = f"{_ANSI[label]}{label}{_RESET}"
            print(f"  '{pwd}'")
            print(
                f"            Strength: [{_bar(r.score)}] {label} "
                f"{r.score}/100 ({r.entropy_bits:.1f} bits)"
            )
            for tip in r.top_tips(args.tips):
                print(f"            ! {tip}")

    if args.min_score is not None:
        weak = [r for r in results if r.score < args.min_score]
        if weak:
            logger.debug("%d password(s) below --min-score %d", len(weak), args.min_score)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
