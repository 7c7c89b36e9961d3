"""Entry point for Infinite Omok. Load config, wire controllers, run a text or GUI match."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event
    from utils import timer
    from Omokgame import Omokgame
    from Match import MatchController, Controller
    from Player import HumanPlayer
    from ai import heuristic
    from gui.text_view import render_ascii, status_line
    from gui.pygame_view import PygameView
except ImportError:
    from Infinite_Omok.utils.cli import parse_args
    from Infinite_Omok.utils.logger import log_event
    from Infinite_Omok.utils import timer
    from Infinite_Omok.Omokgame import Omokgame
    from Infinite_Omok.Match import MatchController, Controller
    from Infinite_Omok.Player import HumanPlayer
    from Infinite_Omok.ai import heuristic
    from Infinite_Omok.gui.text_view import render_ascii, status_line
    from Infinite_Omok.gui.pygame_view import PygameView


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Infinite_Omok/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_controller(args, settings, logger=log_event):
    weights = heuristic.load_weights(resolve_project_path(args.weights))
    game = Omokgame(
        logger=logger,
        weights=weights,
        frontier_radius=int(settings.get("frontier_radius", 2)),
    )
    black = args.black or settings.get("black", "human")
    white = args.white or settings.get("white", "ai")
    delay = args.ai_delay if args.ai_delay is not None else settings.get("ai_delay_ms", 120)
    return MatchController(
        game,
        black=Controller(black),
        white=Controller(white),
        ai_delay_ms=float(delay),
        logger=logger,
    )


def run_text(controller, max_moves=0, input_fn=input, output=print):
    """Blocking text match. Computer moves are played as soon as they are due."""
    game = controller.game
    controller.start(timer.now_ms())
    while not game.is_over:
        if max_moves and game.board.move_count >= max_moves:
            output("Move limit reached")
            break
        if controller.is_ai_turn():
            # Text mode has no frame clock; fire the pending move immediately.
            if not controller.tick(float("inf")):
                output("No candidate moves")
                break
            output(render_ascii(game))
            continue

        output(status_line(game, controller.controllers))
        player = HumanPlayer(game.color, input_fn=input_fn)
        try:
            move = player.next_move(game)
        except ValueError as exc:
            output(str(exc))
            continue
        except EOFError:
            output("Input closed")
            break
        if not controller.human_move(move, timer.now_ms()):
            output("Illegal move, try again")
            continue
        output(render_ascii(game))

    output(status_line(game))
    return game.winner


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    controller = build_controller(args, settings)

    if args.gui or settings.get("gui", False):
        view = PygameView(controller, cell_px=float(settings.get("cell_px", 36)))
        try:
            view.run()
        finally:
            view.close()
        return

    max_moves = args.max_moves if args.max_moves is not None else settings.get("max_moves", 0)
    winner = run_text(controller, max_moves=max_moves)
    outcome = {-1: "Black wins", 1: "White wins"}
    print(outcome.get(winner, "No result"))


if __name__ == "__main__":
    main()
