"""CLI options for selecting controllers, config paths and display."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Infinite Omok (unbounded five-in-a-row)")
    parser.add_argument("--black", choices=["human", "ai"], default=None, help="Controller for Black (default from settings)")
    parser.add_argument("--white", choices=["human", "ai"], default=None, help="Controller for White (default from settings)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", default="config/weights.yaml", help="Path to heuristic weights YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--ai-delay", type=float, default=None, help="Milliseconds before a computer move is played")
    parser.add_argument("--max-moves", type=int, default=None, help="Stop a text match after this many moves (0 = no limit)")
    return parser.parse_args(argv)
