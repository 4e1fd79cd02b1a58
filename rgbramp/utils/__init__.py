from .num_utils import is_real_number, round_half_away, np_round_half_away

__all__ = ["is_real_number", "round_half_away", "np_round_half_away"]
