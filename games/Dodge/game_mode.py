"""
Dodge Game Mode

Survival game - keep the red box inside the arena and away from the
bouncing blue boxes for as long as possible.

Phases:
    WAITING   --click player-->  PLAYING
    PLAYING   --click anywhere--> PAUSED
    PAUSED    --click player-->  PLAYING
    PLAYING   --collision-->     GAME_OVER
    GAME_OVER --click anywhere--> WAITING

While PLAYING, every display frame runs game_tick() then render_tick()
and schedules the next frame. Leaving PLAYING cancels the pending frame.
All times are in milliseconds.
"""
import time
from typing import Callable, List, Optional, Tuple

import pygame

from models import Vector2D, speed_for_elapsed
from pilotlou.games import BaseGame, FrameScheduler, GameState
from pilotlou.games.input import EventType, InputEvent
from pilotlou.logging import get_logger
from games.Dodge import config
from games.Dodge.entities import Enemy, Player, spawn_enemies, spawn_player
from games.Dodge.renderer import DodgeRenderer

log = get_logger('dodge')


class SurfaceNotFoundError(RuntimeError):
    """Raised when the game is created with nothing to draw on."""


def monotonic_ms() -> float:
    """Default clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class DodgeMode(BaseGame):
    """Dodge game mode - survive as long as you can.

    Core mechanic: the player box follows the mouse. Four enemies bounce
    around the whole surface, getting faster over time. Touching an enemy
    or leaving the arena ends the run. The best survival time is kept for
    as long as the process lives.
    """

    NAME = "Dodge"
    DESCRIPTION = "Keep the red box away from the walls and the blue boxes"
    VERSION = "1.0.0"
    AUTHOR = "Pilot Lou Team"

    def __init__(
        self,
        surface: Optional[pygame.Surface] = None,
        scheduler: Optional[FrameScheduler] = None,
        clock: Optional[Callable[[], float]] = None,
        renderer: Optional[DodgeRenderer] = None,
    ):
        """Initialize the Dodge game.

        Args:
            surface: Surface to draw on; defaults to the display surface
            scheduler: Frame scheduler driving the play loop
            clock: Returns the current time in milliseconds
            renderer: Renderer used by render_tick()

        Raises:
            SurfaceNotFoundError: If no surface was given and no display is set
        """
        if surface is None:
            surface = pygame.display.get_surface()
        if surface is None:
            raise SurfaceNotFoundError(
                "No drawing surface found; call pygame.display.set_mode() first"
            )

        self._surface = surface
        self._scheduler = scheduler or FrameScheduler()
        self._now = clock or monotonic_ms
        self._renderer = renderer or DodgeRenderer()
        self._frame_handle: Optional[int] = None

        # Timing (ms)
        self._start_time: Optional[float] = None
        self._pause_time: Optional[float] = None
        self._last_tick: Optional[float] = None
        self._last_elapsed_time = 0.0
        self._best_time = 0.0
        self._speed: float = config.INITIAL_SPEED

        # Entities
        self._player: Player
        self._enemies: List[Enemy]
        self._state = GameState.WAITING

        self.new_game_state()

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def player(self) -> Player:
        return self._player

    @property
    def enemies(self) -> List[Enemy]:
        return self._enemies

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Current surface size as (width, height)."""
        return self._surface.get_size()

    @property
    def speed(self) -> float:
        """Speed divisor; lower is faster."""
        return self._speed

    @property
    def start_time(self) -> Optional[float]:
        return self._start_time

    @property
    def pause_time(self) -> Optional[float]:
        return self._pause_time

    @property
    def last_tick(self) -> Optional[float]:
        return self._last_tick

    @property
    def best_time(self) -> float:
        return self._best_time

    @property
    def last_elapsed_time(self) -> float:
        """Elapsed time of the most recent playing frame, for display."""
        return self._last_elapsed_time

    @property
    def elapsed_time(self) -> float:
        """Time survived in the current run.

        Live while PLAYING; frozen at the pause or game over instant
        otherwise. Zero before the first run starts.
        """
        if self._start_time is None:
            return 0.0
        if self._state == GameState.PLAYING:
            return self._now() - self._start_time
        if self._pause_time is None:
            return 0.0
        return self._pause_time - self._start_time

    def _get_internal_state(self) -> GameState:
        return self._state

    def get_score(self) -> int:
        """Best survival time in whole milliseconds."""
        return int(self._best_time)

    # =========================================================================
    # Reset
    # =========================================================================

    def new_game_state(self) -> None:
        """Put the player and enemies back at their starting layout."""
        width, height = self.dimensions
        self._player = spawn_player(width, height)
        self._enemies = spawn_enemies()
        self._speed = config.INITIAL_SPEED
        self._start_time = None
        self._pause_time = None
        self._state = GameState.WAITING

    def reset(self) -> None:
        """Abandon the current run and return to WAITING."""
        self.stop()
        self.new_game_state()
        self.render_tick()

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process pointer events in the order they arrived."""
        for event in events:
            if event.event_type == EventType.MOVE:
                self.on_pointer_move(event.position)
            elif event.event_type == EventType.CLICK:
                self.on_click(event.position)

    def on_pointer_move(self, position: Vector2D) -> None:
        """Follow the pointer, but only while playing."""
        if self._state == GameState.PLAYING:
            self._player.move_to(position)

    def on_click(self, position: Vector2D) -> None:
        """Advance the phase for a click at position."""
        now = self._now()

        if self._state == GameState.WAITING:
            if self._player.contains_point(position):
                self._state = GameState.PLAYING
                self._start_time = now
                self._pause_time = None
                log.info("Game started")
                self.start(now)

        elif self._state == GameState.PLAYING:
            self._state = GameState.PAUSED
            self._pause_time = now
            self.stop()
            log.info("Paused at %.3fs", self.elapsed_time / 1000)
            self.render_tick()

        elif self._state == GameState.PAUSED:
            if self._player.contains_point(position):
                self._state = GameState.PLAYING
                self._start_time += now - self._pause_time
                log.info("Resumed after %.3fs", (now - self._pause_time) / 1000)
                self.start(now)

        elif self._state == GameState.GAME_OVER:
            self.new_game_state()
            log.info("Waiting for a new game")
            self.render_tick()

    # =========================================================================
    # Frame loop
    # =========================================================================

    def start(self, now: Optional[float] = None) -> None:
        """Run the first frame now and keep requesting frames while playing."""
        self._last_tick = self._now() if now is None else now
        self._scheduler.cancel_frame(self._frame_handle)
        self.render_loop()

    def stop(self) -> None:
        """Cancel the pending frame, halting the play loop."""
        self._scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None

    def render_loop(self) -> None:
        """One scheduled frame: simulate, draw, and book the next frame."""
        if self._state != GameState.PLAYING:
            return
        self.game_tick()
        self.render_tick()
        if self._state == GameState.PLAYING:
            self._frame_handle = self._scheduler.request_frame(self.render_loop)

    def update(self, dt: float) -> None:
        """Frame-dispatch point: run the frame booked by the previous pass.

        Call once per display refresh, before handle_input. A start or resume
        click runs its first frame immediately and books the next one, which
        then waits for the following refresh. Enemy movement uses the game
        clock, so dt is unused.
        """
        self._scheduler.dispatch()

    # =========================================================================
    # Simulation
    # =========================================================================

    def game_tick(self) -> None:
        """Advance enemies, bounce them, and end the run on a collision."""
        now = self._now()
        delta = now - self._last_tick
        width, height = self.dimensions

        for enemy in self._enemies:
            enemy.advance(delta, self._speed)
            enemy.bounce_off_walls(width, height)

        if self.check_collisions():
            self._state = GameState.GAME_OVER
            self._pause_time = now
            self.stop()
            log.info("Game over after %.3fs", self.elapsed_time / 1000)

        self._last_tick = now
        self.update_speed()

    def check_collisions(self) -> bool:
        """True if the player left the arena or touches an enemy."""
        width, height = self.dimensions
        margin = config.ARENA_MARGIN
        box = self._player.bounds

        if (box.left < margin or
                box.right > width - margin or
                box.top < margin or
                box.bottom > height - margin):
            return True

        return any(self._player.collides_with(enemy) for enemy in self._enemies)

    def update_speed(self) -> None:
        """Pick the speed divisor for the current elapsed time."""
        speed = speed_for_elapsed(self.elapsed_time, config.SPEED_SCHEDULE)
        if speed != self._speed:
            log.debug("Speed %s -> %s", self._speed, speed)
            self._speed = speed

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_tick(self) -> None:
        """Record the frame's times, then draw it on the game surface."""
        if self._state == GameState.PLAYING:
            elapsed = self.elapsed_time
            self._last_elapsed_time = elapsed
            self._best_time = max(self._best_time, elapsed)
        self._renderer.render(self._surface, self)

    def render(self, screen: pygame.Surface) -> None:
        """Draw the current state on screen without touching any state."""
        self._renderer.render(screen, self)
