from typing import Tuple, TypeAlias

Point: TypeAlias = Tuple[float, float]
