import numpy as np


def random_points_in_triangle(n, A, B, C, seed=42):
    """
    在 △ABC 内均匀生成 n 个随机点
    """
    np.random.seed(seed)
    A, B, C = (np.asarray(p, dtype=np.float64) for p in (A, B, C))
    u = np.random.rand(n)
    v = np.random.rand(n)
    # 反射法把 (u,v) 保持在 u+v<=1 的区域
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    # 仿射组合
    return A + u[:, None] * (B - A) + v[:, None] * (C - A)


def random_points_in_square(n, low=0.0, high=1.0, seed=42):
    np.random.seed(seed)
    return np.random.uniform(low, high, size=(n, 2))
