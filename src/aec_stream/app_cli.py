from __future__ import annotations

import argparse
import logging
import os
import sys

from .codes import RESET, BGColor, Color, Effect
from .context import StyleContext
from .modes import Mode
from .style import Style, combine
from .writer import StyledStream

_PALETTE = (
    (Color.BLACK, Color.BRIGHT_BLACK, BGColor.BG_BLACK, BGColor.BG_BRIGHT_BLACK),
    (Color.RED, Color.BRIGHT_RED, BGColor.BG_RED, BGColor.BG_BRIGHT_RED),
    (Color.GREEN, Color.BRIGHT_GREEN, BGColor.BG_GREEN, BGColor.BG_BRIGHT_GREEN),
    (Color.YELLOW, Color.BRIGHT_YELLOW, BGColor.BG_YELLOW, BGColor.BG_BRIGHT_YELLOW),
    (Color.BLUE, Color.BRIGHT_BLUE, BGColor.BG_BLUE, BGColor.BG_BRIGHT_BLUE),
    (Color.MAGENTA, Color.BRIGHT_MAGENTA, BGColor.BG_MAGENTA, BGColor.BG_BRIGHT_MAGENTA),
    (Color.CYAN, Color.BRIGHT_CYAN, BGColor.BG_CYAN, BGColor.BG_BRIGHT_CYAN),
    (Color.GRAY, Color.BRIGHT_GRAY, BGColor.BG_GRAY, BGColor.BG_BRIGHT_GRAY),
)


def _build_context(args: argparse.Namespace) -> StyleContext:
    return StyleContext(mode=args.color)


def demo_view(out: StyledStream, args: argparse.Namespace) -> None:
    out.write(Effect.BOLD, Color.RED, "Hello world!\n", RESET)

    out.write(
        "\n",
        Color.BLUE + Style.of(Effect.ITALIC),
        "This text is blue italic\n",
        Color.CRESET,
        "This text is just italic\n",
        Color.GREEN,
        "This text is green italic\n",
        RESET,
        "This text is normal\n",
    )

    out.write(
        "\n",
        BGColor.BG_RED,
        "Be careful with background colors and newlines\n",
        RESET,
        BGColor.BG_BLUE,
        "Use a reset before the newline",
        RESET,
        "\n",
    )

    stored = combine(Color.RED, Effect.BOLD)
    out.write("\n", stored, "Style objects can be used to store escape code combinations\n", RESET)

    out.write(
        "\n",
        combine(Effect.ITALIC, Color.CYAN),
        "Create a style object by combining codes\n",
        RESET,
        Style.of(Color.MAGENTA),
        "Or create them explicitly\n",
        RESET,
        Effect.ITALIC + Style.of(Color.YELLOW),
        "Or combine both methods\n",
        RESET,
    )

    out.write(
        "\n",
        combine(Effect.ITALIC, Effect.BOLD, Color.BLUE, BGColor.BG_RED, Color.RED, BGColor.BG_CYAN),
        "The last value of each type is used, in this case bold, red and bg_cyan",
        RESET,
        "\n",
    )

    out.write("\n")
    for parts, label in (
        ((Color.RED, RESET), "normal"),
        ((RESET, Color.RED), "red"),
        ((Color.RED, RESET, BGColor.BG_BLUE), "bg_blue"),
        ((Effect.BOLD, RESET), "normal"),
        ((RESET, Effect.BOLD), "bold"),
        ((Effect.BOLD, RESET, Color.RED), "red"),
    ):
        out.write(combine(*parts), label, RESET, "\n")

    out.write("\n")
    # Each line is styled as its own mode would style this stream, but never
    # when the chosen mode disables styling here
    caps = out.context.capabilities if out.context is not None else None
    for mode in (Mode.NEVER, Mode.AUTO, Mode.SEMI, Mode.ALWAYS):
        line = StyledStream(out.destination, StyleContext(mode=mode, capabilities=caps)) if out.enabled else out
        line.write(Color.RED, f"Mode: {mode.value}\n", RESET)


def palette_view(out: StyledStream, args: argparse.Namespace) -> None:
    for row in _PALETTE:
        for code in row:
            out.write(code, f"{code.name.lower():<17}", RESET, " ")
        out.write("\n")


def effects_view(out: StyledStream, args: argparse.Namespace) -> None:
    for effect in Effect:
        out.write(effect, effect.name.lower(), RESET, "\n")


def detect_view(out: StyledStream, args: argparse.Namespace) -> None:
    ctx = out.context or StyleContext()
    caps = ctx.capabilities
    caps.recheck_terminal_status()
    lines = [
        f"Mode: {ctx.mode.value}",
        f"TERM: {os.environ.get('TERM')}",
        f"Platform supported: {caps.platform_supported}",
        f"Environment supports styling: {caps.environment_supports_styling()}",
        f"stdout is terminal: {caps.is_interactive_terminal(sys.stdout)}",
        f"stderr is terminal: {caps.is_interactive_terminal(sys.stderr)}",
        f"Styling stdout: {ctx.should_emit(sys.stdout)}",
        f"Styling stderr: {ctx.should_emit(sys.stderr)}",
    ]
    out.write("\n".join(lines), "\n")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="aec-demo",
        description="Show what the escape code styles look like in this terminal.",
    )
    parser.add_argument(
        "--color",
        choices=[m.value for m in Mode],
        default="auto",
        help="Color mode (default: auto)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log capability checks to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("demo", help="Walk through basic usage, style objects and modes")
    sub.add_parser("palette", help="Print every foreground and background color")
    sub.add_parser("effects", help="Print every text effect")
    sub.add_parser("detect", help="Report mode, TERM and terminal detection results")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    out = StyledStream(sys.stdout, _build_context(args))
    if args.command == "demo":
        demo_view(out, args)
    elif args.command == "palette":
        palette_view(out, args)
    elif args.command == "effects":
        effects_view(out, args)
    elif args.command == "detect":
        detect_view(out, args)
    out.flush()


if __name__ == "__main__":
    main()
