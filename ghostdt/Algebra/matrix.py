"""
Small fixed-size determinants by cofactor expansion along the first row.

    | m00 m01 |
    | m10 m11 |  =  m00*m11 - m01*m10

No pivoting: inputs are predicate coefficients, not general linear systems,
and the plain formula keeps integer inputs exact.
"""


def det2(m) -> float:
    return float(m[0][0] * m[1][1] - m[0][1] * m[1][0])


def det3(m) -> float:
    # [0,0  0,1  0,2]
    # [1,0  1,1  1,2]
    # [2,0  2,1  2,2]
    return float(m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
                 - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
                 + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0]))


def det4(m) -> float:
    # 2x2 minors of the bottom two rows, shared by the 3x3 cofactors
    s01 = m[2][0] * m[3][1] - m[2][1] * m[3][0]
    s02 = m[2][0] * m[3][2] - m[2][2] * m[3][0]
    s03 = m[2][0] * m[3][3] - m[2][3] * m[3][0]
    s12 = m[2][1] * m[3][2] - m[2][2] * m[3][1]
    s13 = m[2][1] * m[3][3] - m[2][3] * m[3][1]
    s23 = m[2][2] * m[3][3] - m[2][3] * m[3][2]

    c0 = m[1][1] * s23 - m[1][2] * s13 + m[1][3] * s12
    c1 = m[1][0] * s23 - m[1][2] * s03 + m[1][3] * s02
    c2 = m[1][0] * s13 - m[1][1] * s03 + m[1][3] * s01
    c3 = m[1][0] * s12 - m[1][1] * s02 + m[1][2] * s01
    return float(m[0][0] * c0 - m[0][1] * c1 + m[0][2] * c2 - m[0][3] * c3)
