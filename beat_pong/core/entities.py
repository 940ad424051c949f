"""
Beat Pong game entities: court, ball, paddles and the game-state record
"""

from dataclasses import dataclass
from dataclasses import field

import numpy as np

from beat_pong.utils.config import game_config

PLAYER_ID = 1  # Keyboard-controlled paddle, left edge
OPPONENT_ID = 2  # Rule-controlled paddle, right edge


def sign(value: float) -> float:
    """Sign of ``value`` as -1.0, 0.0 or 1.0"""
    return float(np.sign(value))


@dataclass(frozen=True)
class Court:
    """Fixed rectangular play area"""

    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)

    @classmethod
    def from_config(cls) -> "Court":
        return cls(float(game_config.COURT_WIDTH), float(game_config.COURT_HEIGHT))


class Ball:
    """Game ball, velocity expressed in pixels per frame"""

    def __init__(
        self,
        x: float,
        y: float,
        speed: float | None = None,
        dx: float | None = None,
        dy: float | None = None,
        radius: float | None = None,
    ):
        self.x = x
        self.y = y
        self.speed = speed if speed is not None else game_config.BASE_BALL_SPEED
        # Default direction is down-right at full speed on both axes
        self.dx = dx if dx is not None else self.speed
        self.dy = dy if dy is not None else self.speed
        self.radius = radius if radius is not None else game_config.BALL_RADIUS

    def update(self, step: float = 1.0) -> None:
        """Advances the ball by one frame"""
        self.x += self.dx * step
        self.y += self.dy * step

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.dy = -self.dy

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.dx = -self.dx

    def set_speed(self, speed: float) -> None:
        """Sets the scalar speed, keeping the current direction signs"""
        self.speed = speed
        self.dx = speed * sign(self.dx)
        self.dy = speed * sign(self.dy)

    def reset_to_center(self, court: Court, direction: int, vertical: float) -> None:
        """
        Re-centres the ball after a goal.

        Args:
            court: Court the ball is centred in
            direction: -1 to serve left, 1 to serve right
            vertical: Vertical share of the speed, in [-1, 1]
        """
        self.x, self.y = court.center
        self.dx = self.speed * direction
        self.dy = self.speed * vertical


class Paddle:
    """Player paddle, flush against the left or right edge of the court"""

    def __init__(
        self,
        court: Court,
        player_id: int,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
    ):
        self.player_id = player_id
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.x = 0.0 if player_id == PLAYER_ID else court.width - self.width
        self.y = y if y is not None else court.height / 2 - self.height / 2
        self.score = 0

        self.min_y = 0.0
        self.max_y = court.height - self.height

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def at_top(self) -> bool:
        return self.y <= self.min_y

    def at_bottom(self) -> bool:
        return self.y >= self.max_y

    def constrain_position(self) -> None:
        """Ensures the paddle stays within the court"""
        self.y = max(self.min_y, min(self.max_y, self.y))

    def move(self, dy: float) -> None:
        """Moves the paddle vertically with constraints"""
        self.y += dy
        self.constrain_position()

    def spans(self, y: float) -> bool:
        """Whether ``y`` lies strictly inside the paddle's vertical band"""
        return self.y < y < self.y + self.height

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the paddle rectangle (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)


@dataclass
class PaddleIntent:
    """Held-key state of the keyboard-controlled paddle"""

    moving_up: bool = False
    moving_down: bool = False


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game handed to renderers"""

    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    ball_radius: float
    ball_speed: float
    player_rect: tuple[float, float, float, float]
    opponent_rect: tuple[float, float, float, float]
    score: tuple[int, int]
    bpm: float | None
    frame: int
    court_size: tuple[float, float]


@dataclass
class GameState:
    """Complete mutable game state, owned by the game engine"""

    court: Court
    ball: Ball
    player: Paddle
    opponent: Paddle
    bpm: float | None = None
    frame: int = 0
    intent: PaddleIntent = field(default_factory=PaddleIntent)

    @classmethod
    def new(cls, court: Court | None = None) -> "GameState":
        """Creates the start-of-session state: ball at center, paddles centred"""
        court = court or Court.from_config()
        cx, cy = court.center
        return cls(
            court=court,
            ball=Ball(cx, cy),
            player=Paddle(court, PLAYER_ID),
            opponent=Paddle(court, OPPONENT_ID),
        )

    @property
    def score(self) -> tuple[int, int]:
        return (self.player.score, self.opponent.score)

    def paddle(self, player_id: int) -> Paddle:
        return self.player if player_id == PLAYER_ID else self.opponent

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            ball_position=(self.ball.x, self.ball.y),
            ball_velocity=(self.ball.dx, self.ball.dy),
            ball_radius=self.ball.radius,
            ball_speed=self.ball.speed,
            player_rect=self.player.get_rect(),
            opponent_rect=self.opponent.get_rect(),
            score=self.score,
            bpm=self.bpm,
            frame=self.frame,
            court_size=(self.court.width, self.court.height),
        )
