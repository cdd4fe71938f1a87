"""
Gymnasium environment wrapper for Minesweeper.

Drives a Game session through a standard RL interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import MINE
from .config import BoardConfig
from .game import Game
from .status import GameStatus


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array shaped (height, width) where:
        - -1 = unexplored cell
        - -2 = marked cell
        - -3 = cheat peek
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * width * height + 1.
        With N = width * height:
        - a < N reveals cell (a % width, a // width)
        - N <= a < 2N toggles the flag on cell a - N
        - a == 2N checks the flags and ends the game

    Rewards:
        - +1 for a reveal that opened cells
        - -10 for stepping on a mine
        - +10 / -10 for a check that wins / loses
        - 0 for a flag toggle
        - -0.1 for an action that changed nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-3,
            high=MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        self.num_cells = self.config.total_cells
        self.action_space = spaces.Discrete(2 * self.num_cells + 1)
        self.check_action = 2 * self.num_cells

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game.reset(seed=seed)
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Encoded reveal, flag or check action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        reward = self._apply_action(int(action))

        observation = self.game.get_observation()
        terminated = not self.game.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat cell index to (x, y) position."""
        index = action % self.num_cells
        return index % self.config.width, index // self.config.width

    def position_to_action(self, x: int, y: int, flag: bool = False) -> int:
        """Convert (x, y) to a reveal action, or a flag action if flag is set."""
        action = y * self.config.width + x
        return action + self.num_cells if flag else action

    def _apply_action(self, action: int) -> float:
        """
        Run the action on the game and score it.

        Args:
            action: Encoded action.

        Returns:
            Reward value.
        """
        if action == self.check_action:
            if not self.game.is_playing:
                return -0.1
            status = self.game.check_win()
            return 10.0 if status is GameStatus.WIN else -10.0

        x, y = self.action_to_position(action)
        if action >= self.num_cells:
            return 0.0 if self.game.toggle_flag(x, y) else -0.1

        if not self.game.reveal(x, y):
            return -0.1
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.game.board
        return {
            "steps": self._steps,
            "revealed": len(board.revealed_positions()),
            "flags": len(board.marked_positions()),
            "mines": self.config.num_mines,
            "game_state": self.game.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = the action would change the game.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.game.is_playing:
            return mask
        for x, y, cell in self.game.board.cells():
            if cell.is_unexplored:
                mask[self.position_to_action(x, y)] = True
            if cell.is_unexplored or cell.is_marked:
                mask[self.position_to_action(x, y, flag=True)] = True
        mask[self.check_action] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
