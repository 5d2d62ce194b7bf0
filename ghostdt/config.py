# Offset of the lifting paraboloid z = x^2 + y^2 - WEIGHT.
# Point location and digging must see the same value for one mesh.
WEIGHT = 0.001

# 全局 Delaunay 检查的容差
DELAUNAY_EPS = 1e-10

# refinement: smallest acceptable angle (degrees) and insertion bound
MIN_ANGLE = 20.0
MAX_REFINE = 200
