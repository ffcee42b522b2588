"""Weighted 6/45 lotto number generator driven by historical draw frequencies."""

from .constants import MAIN_MIN, MAIN_MAX, PICK_MAIN
from .errors import LottoError, ConstraintError, SamplingError, ConfigError
from .frequency import FrequencyTable, load_frequencies
from .sampler import weighted_sample_no_replace
from .constraints import Mode, Constraint, Resolution, resolve, mode_for
from .game import LottoGame, generate_game, generate_games, save_games

__version__ = "0.1.0"
