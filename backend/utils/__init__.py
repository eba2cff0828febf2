from .ids import generate_id
from .parsing import is_missing, parse_price, parse_quantity
from .time_utils import utc_now, window_start

__all__ = ['generate_id', 'is_missing', 'parse_price', 'parse_quantity', 'utc_now', 'window_start']
