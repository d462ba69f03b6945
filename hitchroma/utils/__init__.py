from .num_utils import round_half_up, safe_log10, np_safe_log10, count_decimals

__all__ = ["round_half_up", "safe_log10", "np_safe_log10", "count_decimals"]
