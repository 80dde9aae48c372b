from .bit_views import check_float64_layout, float64_to_int64, int64_to_float64
from .min_value import min_value
from .next_up import next_up
from .next_down import next_down
from .next_after import next_after
from .step_tensor import next_up_tensor, next_down_tensor, next_after_tensor
from .get_float64_constants import get_float64_constants
