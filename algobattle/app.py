"""The match runner: agents and humans take turns under a clock, shown in a window."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Sequence

import pygame

from .agents import Agent, DefenceAgent, RandomAgent, SlowRandom
from .board import PassoBoard
from .passo import IllegalMoveError, Move, Passo, State
from .ui import GAME_VIEWPORT_SIZE, HUMAN, SCREEN_SIZE, Text, Ui

DEFAULT_TIME_LIMIT = 30.0
NO_TIME = "--:--"
WINDOW_TITLE = "AlgoBattle"

_RESULT_MESSAGES = {
    State.P1_WIN: ("Player One won the game!", (250, 82, 82)),
    State.P2_WIN: ("Player Two won the game!", (34, 139, 230)),
    State.P1_WIN_TIME: ("Player One won on time!", (250, 82, 82)),
    State.P2_WIN_TIME: ("Player Two won on time!", (34, 139, 230)),
    State.DRAW: ("Draw by repetition!", (125, 125, 125)),
}


class AgentError(RuntimeError):
    """Raised when an agent fails or answers with a move that is not legal."""


def time_to_string(remaining: float) -> str:
    """Format seconds left as seconds and hundredths, "SS:CC"; "00:00" once time is up."""
    if remaining <= 0:
        return "00:00"
    nanoseconds = round(remaining * 1_000_000_000)
    seconds, rest = divmod(nanoseconds, 1_000_000_000)
    return f"{seconds:02d}:{rest // 10_000_000:02d}"


class _Calculation:
    """An agent working out its move on a copy of the game, in the background."""

    def __init__(self, agent: Agent, game: Passo) -> None:
        self.agent = agent
        self.move: Move | None = None
        self.error: Exception | None = None
        self._done = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(game,), name=f"agent-{agent.name}", daemon=True
        )
        self._thread.start()

    def _run(self, game: Passo) -> None:
        try:
            self.move = self.agent.calculate_move(game)
        except Exception as exc:  # reported to the app when it collects the result
            self.error = exc
        finally:
            self._done.set()

    @property
    def done(self) -> bool:
        return self._done.is_set()


class App:
    """Runs matches between agents and human players, with a clock for each agent."""

    def __init__(
        self,
        agents: Sequence[Agent],
        time_limit: float = DEFAULT_TIME_LIMIT,
        game: Passo | None = None,
        board: PassoBoard | None = None,
    ) -> None:
        self.agents = list(agents)
        self.time_limit = float(time_limit)
        self.game = game if game is not None else Passo()
        self.board = board if board is not None else PassoBoard()
        self.ui = Ui(self.board.title)
        self.ui.add_agents(agent.name for agent in self.agents)

        self.human = len(self.agents)
        self.players = [self.human, self.human]
        self.remaining = [0.0, 0.0]
        self.state = State.DEFAULT
        self._last_time: float | None = None
        self._pending: _Calculation | None = None

    @property
    def calculating(self) -> bool:
        """Whether an agent is working out a move right now."""
        return self._pending is not None

    def _is_agent(self, player: int) -> bool:
        return self.players[player] != self.human

    def start_match(self, player_one: int, player_two: int, now: float) -> None:
        """Start a new match; an index equal to the number of agents means a human."""
        for index in (player_one, player_two):
            if not 0 <= index <= self.human:
                raise ValueError(f"no player with index {index}")
        self.game.reset()
        self.board.reset()
        self.players = [player_one, player_two]
        self.state = State.RUNNING
        self._pending = None
        self._last_time = now

        clocks = (
            (self.ui.player_one_name, self.ui.player_one_time),
            (self.ui.player_two_name, self.ui.player_two_time),
        )
        for player, (name, clock) in enumerate(clocks):
            index = self.players[player]
            if index == self.human:
                name.string = HUMAN
                clock.string = NO_TIME
            else:
                name.string = self.agents[index].name
                self.remaining[player] = self.time_limit

    def handle_board_click(self, pos) -> Move | None:
        """Pass a click in board coordinates to the board when a human is to move."""
        if self.state is not State.RUNNING or self._is_agent(self.game.player_turn):
            return None
        move = self.board.handle_input(pos, self.game)
        if move is not None:
            self.game.make_move(move)
            self.state = self.game.game_result()
        return move

    def update(self, now: float) -> None:
        """Start or collect agent moves and run the clock of the agent to move."""
        turn = self.game.player_turn
        agent_to_move = self._is_agent(turn)

        if agent_to_move and self.state is State.RUNNING and self._pending is None:
            agent = self.agents[self.players[turn]]
            self._pending = _Calculation(agent, self.game.copy())

        pending = self._pending
        if pending is not None and pending.done:
            self._pending = None
            name = pending.agent.name
            if pending.error is not None:
                raise AgentError(f"'{name}' failed: {pending.error}") from pending.error
            if not isinstance(pending.move, Move):
                raise AgentError(f"'{name}' did not return a move")
            try:
                self.game.make_move(pending.move)
            except IllegalMoveError as exc:
                raise AgentError(f"'{name}' played an illegal move: {exc}") from exc
            self.state = self.game.game_result()

        if agent_to_move and self.state is State.RUNNING and self._last_time is not None:
            self.remaining[turn] -= now - self._last_time
            if self.remaining[turn] <= 0:
                self.state = State.P1_WIN_TIME if turn else State.P2_WIN_TIME
                self._pending = None
                return
        self._last_time = now

    def result_message(self) -> tuple[str, tuple[int, int, int]] | None:
        """The announcement for a finished game and its colour, or None while undecided."""
        return _RESULT_MESSAGES.get(self.state)

    def _viewport(self) -> pygame.Rect:
        view_w, view_h = GAME_VIEWPORT_SIZE
        return pygame.Rect(
            round((SCREEN_SIZE[0] - view_w) / 2),
            round((SCREEN_SIZE[1] - view_h) / 2),
            round(view_w),
            round(view_h),
        )

    def _to_board(self, pos) -> tuple[float, float]:
        viewport = self._viewport()
        board_w, board_h = self.board.screen_size
        return (
            (pos[0] - viewport.left) * board_w / viewport.width,
            (pos[1] - viewport.top) * board_h / viewport.height,
        )

    def _click(self, pos) -> None:
        board_pos = self._to_board(pos)
        board_w, board_h = self.board.screen_size
        if 0.0 <= board_pos[0] <= board_w and 0.0 <= board_pos[1] <= board_h:
            self.handle_board_click(board_pos)
        elif self.ui.handle_input(pos):
            self.start_match(self.ui.player_one, self.ui.player_two, time.monotonic())

    def _draw(self, screen: pygame.Surface, board_surface: pygame.Surface) -> None:
        screen.fill((0, 0, 0))
        board_surface.fill((0, 0, 0))
        self.board.draw(board_surface, self.game)
        viewport = self._viewport()
        screen.blit(pygame.transform.smoothscale(board_surface, viewport.size), viewport.topleft)

        if self._is_agent(0):
            self.ui.player_one_time.string = time_to_string(self.remaining[0])
        if self._is_agent(1):
            self.ui.player_two_time.string = time_to_string(self.remaining[1])
        self.ui.draw(screen)

        message = self.result_message()
        if message is not None:
            text, colour = message
            view_w, view_h = GAME_VIEWPORT_SIZE
            width, height = round(0.8 * view_w), round(0.3 * view_h)
            shade = pygame.Surface((width, height), pygame.SRCALPHA)
            shade.fill((0, 0, 0, 180))
            centre = (SCREEN_SIZE[0] / 2, SCREEN_SIZE[1] / 2)
            screen.blit(shade, (round(centre[0] - width / 2), round(centre[1] - height / 2)))
            banner = Text(centre, text, 56, colour)
            banner.italic = True
            banner.offset = (0.0, -28.0)
            banner.draw(screen, self.ui.fonts)

        pygame.display.flip()

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            size = (int(SCREEN_SIZE[0]), int(SCREEN_SIZE[1]))
            screen = pygame.display.set_mode(size, pygame.FULLSCREEN | pygame.SCALED)
            pygame.display.set_caption(WINDOW_TITLE)
            board_size = (int(self.board.screen_size[0]), int(self.board.screen_size[1]))
            board_surface = pygame.Surface(board_size)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self._click(event.pos)
                self.update(time.monotonic())
                self._draw(screen, board_surface)
                clock.tick(60)
        finally:
            self._pending = None
            pygame.quit()


def main(argv=None) -> int:
    """Start the game window with the built-in agents."""
    parser = argparse.ArgumentParser(prog="algobattle", description="Pit Passo agents against each other.")
    parser.add_argument(
        "--time-limit",
        type=float,
        default=DEFAULT_TIME_LIMIT,
        help="seconds on each agent's clock (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.time_limit <= 0:
        parser.error("--time-limit must be positive")
    agents = [RandomAgent(), SlowRandom(), DefenceAgent()]
    App(agents, args.time_limit).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())