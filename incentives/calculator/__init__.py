from .ic_engine import calculate_ic_incentive
from .manager_engine import calculate_manager_incentive
