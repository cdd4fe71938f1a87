"""
Unit tests for board configuration and settings clamping.
"""
import pytest
from mines import (
    BoardConfig,
    InvalidConfigurationError,
    clamp_settings,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.width == 9
        assert valid_config.height == 9
        assert valid_config.num_mines == 10

    def test_default_matches_classic_settings(self) -> None:
        """Default board is 8x8 with 10 mines."""
        assert BoardConfig() == DEFAULT == BoardConfig(8, 8, 10)

    @pytest.mark.parametrize("preset", [DEFAULT, BEGINNER, INTERMEDIATE, EXPERT])
    def test_presets_leave_safe_cells(self, preset: BoardConfig) -> None:
        """Every preset has at least one safe cell."""
        assert 0 < preset.num_mines < preset.total_cells
        assert preset.safe_cells == preset.total_cells - preset.num_mines

    def test_invalid_configuration_is_value_error(self) -> None:
        """Callers catching ValueError also catch configuration errors."""
        assert issubclass(InvalidConfigurationError, ValueError)

    @pytest.mark.parametrize("width", [0, -1, 21])
    def test_width_out_of_range_raises_error(self, width: int) -> None:
        """Width outside 1..20 is rejected."""
        with pytest.raises(InvalidConfigurationError, match="Width"):
            BoardConfig(width, 9, 1)

    @pytest.mark.parametrize("height", [0, -1, 21])
    def test_height_out_of_range_raises_error(self, height: int) -> None:
        """Height outside 1..20 is rejected."""
        with pytest.raises(InvalidConfigurationError, match="Height"):
            BoardConfig(9, height, 1)

    def test_zero_mines_raises_error(self) -> None:
        """A board needs at least one mine."""
        with pytest.raises(InvalidConfigurationError, match="At least one mine"):
            BoardConfig(9, 9, 0)

    def test_too_many_mines_raises_error(self) -> None:
        """Mines must leave at least one safe cell."""
        with pytest.raises(InvalidConfigurationError, match="Too many mines"):
            BoardConfig(3, 3, 9)

    def test_max_mines_is_valid(self) -> None:
        """Maximum valid mines should be accepted."""
        assert BoardConfig(3, 3, 8).num_mines == 8

    @pytest.mark.parametrize(
        "width, height, num_mines",
        [
            (2.5, 3, 1), (3, 3.0, 1), (3, 3, 1.5),
            ("3", 3, 1), (3, "3", 1), (3, 3, "1"), (True, 3, 1),
        ],
    )
    def test_non_integer_values_raise_error(self, width, height, num_mines) -> None:
        """Only integers are accepted for dimensions and mine count."""
        with pytest.raises(InvalidConfigurationError, match="must be an integer"):
            BoardConfig(width, height, num_mines)

    def test_max_dimensions_are_valid(self) -> None:
        """A 20x20 board is the largest allowed."""
        config = BoardConfig(20, 20, 1)
        assert config.total_cells == 400

    @pytest.mark.parametrize("num_mines", [0, 1, 2])
    def test_single_cell_board_is_rejected(self, num_mines: int) -> None:
        """A 1x1 board cannot hold a mine and a safe cell."""
        with pytest.raises(InvalidConfigurationError):
            BoardConfig(1, 1, num_mines)


# ============================================================================
# Settings Clamp Tests
# ============================================================================

class TestClampSettings:
    """Test coercion of raw settings into a legal configuration."""

    def test_legal_settings_pass_through(self) -> None:
        """Legal settings are unchanged."""
        assert clamp_settings(8, 8, 10) == BoardConfig(8, 8, 10)

    def test_string_settings_are_parsed(self) -> None:
        """Form values arrive as strings."""
        assert clamp_settings("12", "7", "5") == BoardConfig(12, 7, 5)

    def test_large_dimensions_are_capped(self) -> None:
        """Dimensions above the maximum are capped."""
        config = clamp_settings(50, 30, 10)
        assert (config.width, config.height) == (20, 20)

    def test_small_dimensions_are_raised(self) -> None:
        """Dimensions below the minimum are raised."""
        config = clamp_settings(0, 5, 1)
        assert (config.width, config.height) == (1, 5)

    def test_too_many_mines_leave_one_safe_cell(self) -> None:
        """Mine count is capped at cells minus one."""
        assert clamp_settings(4, 4, 100).num_mines == 15

    @pytest.mark.parametrize("num_mines", [0, -3])
    def test_non_positive_mines_become_one(self, num_mines: int) -> None:
        """Zero or negative mine counts become a single mine."""
        assert clamp_settings(5, 5, num_mines).num_mines == 1

    def test_single_cell_board_cannot_be_clamped(self) -> None:
        """A 1x1 board has no legal mine count."""
        with pytest.raises(InvalidConfigurationError):
            clamp_settings(1, 1, 1)

    def test_non_numeric_settings_raise_error(self) -> None:
        """Garbage input is a configuration error."""
        with pytest.raises(InvalidConfigurationError, match="integers"):
            clamp_settings("wide", 5, 5)
