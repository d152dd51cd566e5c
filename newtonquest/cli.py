"""
Newton Quest CLI - Command-line interface for the engine.

Usage:
    newtonquest play                 Play in the terminal
    newtonquest show                 Print the current scene
    newtonquest validate <file>      Validate a scene content file
    newtonquest reset                Start over (deletes the save)
"""

import argparse
import logging
import sys

from . import config


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Newton Quest - Interactive Fiction Engine",
        prog="newtonquest",
    )
    parser.add_argument("--scenes", help="Scene content file (default: bundled adventure)")
    parser.add_argument("--save-dir", help="Directory for the save file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log engine activity")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("play", help="Play in the terminal")
    subparsers.add_parser("show", help="Print the current scene")

    validate_parser = subparsers.add_parser("validate", help="Validate a scene content file")
    validate_parser.add_argument("scenes_file", help="Path to scene content JSON")

    subparsers.add_parser("reset", help="Start a new game (deletes the save)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "show":
        cmd_show(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "reset":
        cmd_reset(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_validate(args):
    """Validate a scene content file."""
    from .scene_schema import SceneGraphError, load_scene_graph

    print(f"Validating: {args.scenes_file}")
    try:
        graph = load_scene_graph(args.scenes_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.scenes_file}")
        sys.exit(1)
    except SceneGraphError as e:
        print(f"\n{type(e).__name__}:")
        for error in e.errors:
            print(f"  - {error}")
        sys.exit(1)

    print(f"OK: {len(graph)} scenes, start '{graph.start_scene_id}', death '{graph.death_scene_id}'")
    if graph.warnings:
        print("\nWarnings:")
        for w in graph.warnings:
            print(f"  - {w}")


def cmd_show(args):
    """Print the current scene."""
    session = _start_session(args)
    print(render_view(session.view()))


def cmd_reset(args):
    """
    Start a new game.

    The process exits right after, so the save record is deleted rather
    than left for a next choice to overwrite; the next start restores
    a new game.
    """
    from .persistence import SAVE_KEY

    session = _start_session(args)
    session.store.delete(SAVE_KEY)
    session.reset()
    print("Save deleted.")
    print(render_view(session.view()))


def cmd_play(args):
    """Interactive play loop."""
    from .session import ChoiceUnavailable

    session = _start_session(args)

    while True:
        view = session.view()
        print(render_view(view))
        if view.is_terminal:
            print("\n[r] reset  [q] quit")

        try:
            answer = input("> ").strip().lower()
        except EOFError:
            print()
            break

        if answer in ("q", "quit"):
            break
        if answer in ("r", "reset"):
            session.reset()
            continue

        try:
            index = int(answer)
        except ValueError:
            print("Pick a choice number, 'r' to reset or 'q' to quit.")
            continue

        try:
            result = session.choose(index)
        except ChoiceUnavailable:
            print(f"There is no choice {index} here.")
            continue

        for change in result.changes:
            print(f"  * {change}")


def render_view(view) -> str:
    """Render a SceneView as terminal text."""
    lines = [
        f"== {view.title} ==",
        view.body,
        "",
        f"Health: {view.health}",
        f"Inventory: {', '.join(view.inventory) if view.inventory else '(empty)'}",
    ]
    if view.choices:
        lines.append("")
        for choice in view.choices:
            lines.append(f"  [{choice.index}] {choice.text}")
    return "\n".join(lines)


def _start_session(args):
    from .scene_schema import SceneGraphError
    from .session import Session

    try:
        graph = config.build_graph(args.scenes)
    except FileNotFoundError:
        print(f"Error: File not found: {args.scenes or config.NEWTON_SCENES_FILE}")
        sys.exit(1)
    except SceneGraphError as e:
        print(f"Error: {e}")
        sys.exit(1)

    return Session.start(graph, config.build_store(args.save_dir))


if __name__ == "__main__":
    main()
