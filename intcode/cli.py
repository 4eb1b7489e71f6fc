#!/usr/bin/env python3
"""
Intcode CLI — run, patch and disassemble Intcode programs
Commands: run · patch · disasm · version
"""

import argparse
import logging
import sys

from intcode import __version__


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path) as f:
        return f.read()


def _load_program(path: str):
    """Read a program file (or stdin for '-') and parse it."""
    from intcode.parser import parse_program
    from intcode.errors import ParseError
    try:
        return parse_program(_read_text(path))
    except ParseError as e:
        print(f"❌ Parse error: {e}", file=sys.stderr)
        sys.exit(1)


# ---------------------------------------------------------------------------
# sub-command handlers
# ---------------------------------------------------------------------------

def cmd_run(args):
    """intcode run program.txt [-i N ...] [--ascii-in LINE ...] [--ascii] [--trace]"""
    from intcode.vm import IntcodeVM, iterator_input, split_ascii
    from intcode.errors import IntcodeError

    program = _load_program(args.input)
    inputs = list(args.inputs or [])
    for line in args.ascii_in or []:
        inputs.extend(ord(ch) for ch in line)
        inputs.append(ord("\n"))

    outputs = []
    vm = IntcodeVM(program, iterator_input(inputs), outputs.append, trace=args.trace)
    try:
        vm.run()
    except IntcodeError as e:
        print(f"❌ Runtime error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.ascii:
        text, tail = split_ascii(outputs)
        sys.stdout.write(text)
        for v in tail:
            print(v)
    else:
        for v in outputs:
            print(v)
    if args.verbose:
        print(f"\n[VM] steps={vm.steps} ip={vm.ip} rb={vm.relative_base} "
              f"memory={len(vm.memory)} words")


def cmd_patch(args):
    """intcode patch program.txt NOUN VERB — restricted run, prints cell 0"""
    from intcode.vm import run_with_noun_verb
    from intcode.errors import IntcodeError

    program = _load_program(args.input)
    try:
        print(run_with_noun_verb(program, args.noun, args.verb))
    except IntcodeError as e:
        print(f"❌ Runtime error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_disasm(args):
    """intcode disasm program.txt"""
    from intcode.disasm import disassemble
    print(disassemble(_load_program(args.input)))


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="intcode",
        description=(
            f"Intcode VM v{__version__}\n\n"
            "  run        Run a program to halt, printing outputs\n"
            "  patch      Set cells 1 and 2 (noun, verb), run, print cell 0\n"
            "  disasm     Disassemble a program → human-readable\n"
            "  version    Show version info\n"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"intcode {__version__}"
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    # ── run ────────────────────────────────────────────────────────────────
    p_run = sub.add_parser("run", help="Run a program")
    p_run.add_argument("input", help="program file ('-' for stdin)")
    p_run.add_argument("-i", "--input", dest="inputs", type=int, action="append",
                       metavar="N", help="queue an input value (repeatable)")
    p_run.add_argument("--ascii-in", action="append", metavar="LINE",
                       help="queue a line as ASCII codes plus newline (repeatable)")
    p_run.add_argument("--ascii", action="store_true", help="Render outputs as ASCII text")
    p_run.add_argument("--trace", action="store_true", help="Trace execution")
    p_run.add_argument("-v", "--verbose", action="store_true", help="Show VM summary")
    p_run.set_defaults(func=cmd_run)

    # ── patch ──────────────────────────────────────────────────────────────
    p_patch = sub.add_parser("patch", help="Run with noun/verb patched into cells 1 and 2")
    p_patch.add_argument("input", help="program file ('-' for stdin)")
    p_patch.add_argument("noun", type=int)
    p_patch.add_argument("verb", type=int)
    p_patch.set_defaults(func=cmd_patch)

    # ── disasm ─────────────────────────────────────────────────────────────
    p_dis = sub.add_parser("disasm", help="Disassemble a program")
    p_dis.add_argument("input", help="program file ('-' for stdin)")
    p_dis.set_defaults(func=cmd_disasm)

    # ── version ────────────────────────────────────────────────────────────
    p_ver = sub.add_parser("version", help="Show version info")
    p_ver.set_defaults(func=lambda _: print(f"intcode {__version__}"))

    # ── dispatch ───────────────────────────────────────────────────────────
    args = parser.parse_args(argv)
    if getattr(args, "trace", False):
        level = logging.DEBUG
    elif getattr(args, "verbose", False):
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
