"""
Klondike CLI - Command-line interface for the engine.

Usage:
    klondike deal [--seed N]                  Print a freshly dealt layout
    klondike autoplay [--seed N] [--turns N]  Run the greedy demo loop
    klondike serve [--host H] [--port P]      Serve the REST API
"""

import argparse
import os
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Klondike - Solitaire Rules Engine",
        prog="klondike",
    )
    parser.add_argument("--log-level", help="Logging level (default: $KLONDIKE_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-format", choices=["text", "json"], help="Log format (default: $KLONDIKE_LOG_FORMAT or text)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Deal command
    deal_parser = subparsers.add_parser("deal", help="Deal and print a new game")
    deal_parser.add_argument("--seed", type=int, help="Shuffle seed")

    # Autoplay command
    autoplay_parser = subparsers.add_parser("autoplay", help="Play greedy turns")
    autoplay_parser.add_argument("--seed", type=int, help="Shuffle seed")
    autoplay_parser.add_argument("--turns", type=int, default=10, help="Maximum turns")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Serve the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    args.log_level = args.log_level or os.getenv("KLONDIKE_LOG_LEVEL", "WARNING")
    args.log_format = args.log_format or os.getenv("KLONDIKE_LOG_FORMAT", "text")

    from .observability import setup_logging
    setup_logging(args.log_level, args.log_format)

    if args.command == "deal":
        cmd_deal(args)
    elif args.command == "autoplay":
        cmd_autoplay(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_deal(args):
    """Deal a game and print it."""
    from .engine_core import deal_new_game
    from .render import render_state

    state = deal_new_game(random_seed=args.seed)
    print(render_state(state))


def cmd_autoplay(args):
    """Run the greedy loop, printing the state after each turn."""
    from .engine_core import deal_new_game
    from .render import render_state
    from .session import GameLoop, LoopState

    loop = GameLoop(deal_new_game(random_seed=args.seed))
    print(render_state(loop.game_state))

    def show(result):
        print(f"\n=== Turn {result.turn} ===")
        for move in result.moves:
            print(f"  {move}")
        print(render_state(loop.game_state))

    loop.run(args.turns, on_turn=show)

    if loop.state == LoopState.WON:
        print("\nYou won!")


def cmd_serve(args):
    """Serve the REST API with uvicorn."""
    import uvicorn

    # read by klondike.api.app when uvicorn imports it
    os.environ["KLONDIKE_LOG_LEVEL"] = args.log_level
    os.environ["KLONDIKE_LOG_FORMAT"] = args.log_format

    uvicorn.run(
        "klondike.api.app:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
