from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..entities import Ghost, Player
from ..level.generator import LevelGenerator
from ..level.grid import Point
from ..level.spawns import SpawnLocator
from ..level.tiles import TileType
from ..render.snapshot import GhostView, LevelSnapshot, NullRenderer, PlayerView, Renderer
from ..settings import Settings
from .events import GameEvent
from .ghost_ai import GhostMover, RandomSource, default_rng
from .roster import GhostRoster
from .state import SimulationState

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


class TurnEngine:
    """Runs the simulation: player moves, combat, ghost moves and level changes.

    Call ``start_game`` once, then for every input one of the ``move_*``
    methods followed by ``do_turn``. All mutable state lives in ``self.state``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        renderer: Optional[Renderer] = None,
        rng: Optional[RandomSource] = None,
        generator: Optional[LevelGenerator] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.renderer: Renderer = renderer or NullRenderer()
        self.rng: RandomSource = rng if rng is not None else default_rng(self.settings.seed)
        self.generator = generator or LevelGenerator(self.settings.width, self.settings.height)
        self.mover = GhostMover(self.rng, self.settings.move_chance, self.settings.near_distance)
        self._state: Optional[SimulationState] = None
        self._listeners: List[Callable[[GameEvent, "TurnEngine"], None]] = []

    # ---- Events ----------------------------------------------------------
    def add_listener(self, listener: Callable[[GameEvent, "TurnEngine"], None]) -> None:
        """Subscribe to game events (movement, captures, level changes)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:  # listeners must not break a turn
                logger.exception("Listener errored on %s: %s", event, ex)

    # ---- State -----------------------------------------------------------
    @property
    def state(self) -> SimulationState:
        if self._state is None:
            raise RuntimeError("Game has not been started; call start_game() first")
        return self._state

    @property
    def started(self) -> bool:
        return self._state is not None

    def snapshot(self) -> LevelSnapshot:
        state = self.state
        player = state.player
        return LevelSnapshot(
            level_number=state.level_number,
            turn_number=state.turn_number,
            tiles=state.grid.snapshot(),
            player=PlayerView(player.x, player.y, player.energy, player.max_energy, player.carrying_ghost),
            ghosts=tuple(
                GhostView(g.x, g.y, g.health, g.max_health) if g is not None else None
                for g in state.roster.slots
            ),
        )

    def render(self) -> None:
        self.renderer.render(self.snapshot())

    # ---- Level lifecycle -------------------------------------------------
    def start_game(self) -> SimulationState:
        """Build level 1, place ghosts and the player, and draw the first frame."""
        grid = self.generator.generate(1)
        spawns = SpawnLocator.for_grid(grid)
        player_point, ghost_points = self._choose_spawns(spawns)
        player = Player(player_point.x, player_point.y, self.settings.player_max_energy)
        self._state = SimulationState(
            grid=grid,
            player=player,
            roster=self._populate_roster(ghost_points, 1),
            spawns=spawns,
        )
        logger.info("Game started: level 1, player at %s, %d ghosts", player.pos, len(self._state.roster))
        self.render()
        return self._state

    def next_level(self) -> None:
        """Advance to a freshly generated level, keeping the same player."""
        state = self.state
        state.level_number += 1
        state.grid = self.generator.generate(state.level_number)
        state.spawns = SpawnLocator.for_grid(state.grid)
        player_point, ghost_points = self._choose_spawns(state.spawns)
        state.player.reset(player_point.x, player_point.y)
        state.roster = self._populate_roster(ghost_points, state.level_number)
        logger.info("Advanced to level %d; player at %s", state.level_number, state.player.pos)
        self._emit(GameEvent.LEVEL_ADVANCED)

    def _choose_spawns(self, spawns: SpawnLocator) -> Tuple[Point, List[Point]]:
        # Fixed points are reserved before any random pick can claim them.
        fixed_player = spawns.take(self.settings.player_start) if self.settings.player_start else None
        ghost_points = [spawns.take(p) for p in self.settings.ghost_starts]
        while len(ghost_points) < self.settings.roster_capacity:
            ghost_points.append(spawns.take_random(self.rng))
        player_point = fixed_player or spawns.take_random(self.rng)
        return player_point, ghost_points

    def _ghost_health(self, level_number: int) -> int:
        return self.settings.ghost_max_health + self.settings.ghost_health_per_level * (level_number - 1)

    def _populate_roster(self, points: List[Point], level_number: int) -> GhostRoster:
        roster = GhostRoster(self.settings.roster_capacity)
        health = self._ghost_health(level_number)
        for p in points:
            roster.place(Ghost(p.x, p.y, health))
        return roster

    # ---- Player movement -------------------------------------------------
    def move_up(self) -> bool:
        return self.move_player(Direction.UP)

    def move_down(self) -> bool:
        return self.move_player(Direction.DOWN)

    def move_left(self) -> bool:
        return self.move_player(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move_player(Direction.RIGHT)

    def move_player(self, direction: Direction) -> bool:
        """Resolve one movement command.

        Breach sealing and the attack on co-located ghosts happen whether or
        not the move was blocked.

        Args:
            direction: Which way to step.

        Returns:
            True if the player changed tile.

        Raises:
            IndexError: If ``bank_double_step`` would carry the player off the grid.
        """
        state = self.state
        grid, player = state.grid, state.player
        dx, dy = direction.delta

        target = grid.get(player.x + dx, player.y + dy)
        moved = not target.blocks_player
        if moved:
            player.move_by(dx, dy)
            logger.debug("Player moved %s to %s", direction.name, player.pos)
            self._emit(GameEvent.PLAYER_MOVED)
            if grid.get(player.x, player.y) is TileType.BANK:
                self._visit_bank(dx, dy)
        else:
            logger.debug("Player blocked moving %s into %s at %s", direction.name, target.name, player.pos)
            self._emit(GameEvent.PLAYER_BLOCKED)

        ahead = player.point.offset(dx, dy)
        if grid.safe_get(ahead.x, ahead.y) is TileType.BREACH and player.carrying_ghost:
            player.deposit_ghost()
            grid.set(ahead.x, ahead.y, TileType.FLOOR2)
            logger.info("Breach at %s sealed", (ahead.x, ahead.y))
            self._emit(GameEvent.BREACH_SEALED)

        for ghost in list(state.roster):
            if ghost.pos == player.pos:
                self.hit_ghost(ghost)
        return moved

    def _visit_bank(self, dx: int, dy: int) -> None:
        player = self.state.player
        player.refill_energy()
        if self.settings.bank_double_step:
            if not self.state.grid.in_bounds(player.x + dx, player.y + dy):
                raise IndexError(f"Bank step would leave the grid from {player.pos}")
            player.move_by(dx, dy)
        if player.deposit_ghost():
            logger.info("Ghost deposited at bank; energy refilled to %d", player.energy)
            self._emit(GameEvent.GHOST_DEPOSITED)
        else:
            logger.debug("Bank visited; energy refilled to %d", player.energy)

    # ---- Combat ----------------------------------------------------------
    def hit_ghost(self, ghost: Ghost) -> None:
        """Attack a ghost sharing the player's tile.

        With energy left, the player pays ``energy_cost`` and the ghost loses
        ``ghost_damage`` health. A ghost at or below zero health is captured.
        Defeated ghosts are then cleaned up, whether or not the attack landed,
        so the roster may be refilled from breaches before this returns.

        Args:
            ghost: A ghost from the current roster.
        """
        player = self.state.player
        if player.energy > 0:
            player.change_energy(-self.settings.energy_cost)
            ghost.change_health(-self.settings.ghost_damage)
            logger.debug("Hit %r; player energy now %d", ghost, player.energy)
            self._emit(GameEvent.GHOST_HIT)
        if ghost.defeated:
            player.capture_ghost()
            logger.info("Ghost captured at %s", ghost.pos)
            self._emit(GameEvent.GHOST_CAPTURED)
        self.clean_defeated_ghosts()

    def clean_defeated_ghosts(self) -> None:
        """Remove defeated ghosts; refill the roster from breaches once it runs empty."""
        state = self.state
        removed = state.roster.remove_defeated()
        if removed:
            logger.debug("Removed %d defeated ghost(s)", removed)
        if state.roster.is_empty() and state.player.carrying_ghost:
            self._respawn_from_breaches()

    def _respawn_from_breaches(self) -> None:
        state = self.state
        health = self._ghost_health(state.level_number)
        spawned = 0
        dropped: List[Point] = []
        for p in state.grid.find(TileType.BREACH):
            if state.roster.place(Ghost(p.x, p.y, health)) is None:
                dropped.append(p)
                continue
            state.grid.set(p.x, p.y, TileType.FLOOR1)
            spawned += 1
        if dropped:
            logger.warning(
                "Roster full (%d slots); %d breach(es) left active: %s",
                state.roster.capacity, len(dropped), [(p.x, p.y) for p in dropped],
            )
        if spawned:
            logger.info("%d ghost(s) emerged from breaches", spawned)
            self._emit(GameEvent.GHOSTS_RESPAWNED)

    # ---- Turn ------------------------------------------------------------
    def move_ghosts(self) -> None:
        state = self.state
        for ghost in state.roster:
            self.mover.move(ghost, state.player, state.grid)

    def do_turn(self) -> bool:
        """Finish the current turn. Returns True if the level was completed."""
        state = self.state
        self.clean_defeated_ghosts()
        self.move_ghosts()
        self.render()

        completed = state.level_complete
        if completed:
            logger.info("Level %d cleared after turn %d", state.level_number, state.turn_number)
            self.next_level()
        state.turn_number += 1
        self._emit(GameEvent.TURN_COMPLETED)
        return completed
