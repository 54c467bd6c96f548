"""ESC risk charts.

10-year risk (%) of cardiovascular events (SCORE2, SCORE2-OP) or of fatal
cardiovascular disease (SCORE 2016, SCORE Germany 2016, SCORE older persons).

Every grid is laid out as printed in the guideline: rows run from the
oldest age band down to the youngest and, within an age band, from the
highest systolic band down to the lowest. Columns are four blocks (women
non-smokers, women smokers, men non-smokers, men smokers), each with the
cholesterol bands in ascending order. Row letters match the printed charts.

References:
    SCORE2 working group and ESC Cardiovascular risk collaboration. SCORE2
    risk prediction algorithms. Eur Heart J. 2021;42(25):2439-2454.
    SCORE2-OP working group and ESC Cardiovascular risk collaboration.
    SCORE2-OP risk prediction algorithms. Eur Heart J. 2021;42(25):2455-2467.
    Piepoli MF, et al. 2016 European Guidelines on cardiovascular disease
    prevention in clinical practice. Eur Heart J. 2016;37(29):2315-2381.
    Keil U, et al. Adaptation of the SCORE risk chart for Germany.
    Eur J Cardiovasc Prev Rehabil. 2005;12(5):452-459.
"""

# SCORE2, ages 40-69: 6 age bands x 4 systolic bands, 4 non-HDL bands
SCORE2 = {
    "low": (
        (8, 8, 9, 9, 12, 12, 13, 13, 11, 12, 12, 13, 15, 16, 17, 19),  # A
        (7, 7, 7, 7, 10, 10, 11, 11, 9, 10, 11, 11, 13, 14, 15, 16),  # B
        (5, 6, 6, 6, 8, 9, 9, 9, 8, 8, 9, 10, 11, 12, 13, 13),  # C
        (5, 5, 5, 5, 7, 7, 7, 8, 6, 7, 7, 8, 9, 10, 11, 11),  # D
        (6, 6, 7, 7, 10, 10, 11, 11, 8, 9, 10, 11, 13, 14, 15, 17),  # E
        (5, 5, 5, 6, 8, 8, 9, 9, 7, 8, 8, 9, 10, 11, 13, 14),  # F
        (4, 4, 4, 5, 6, 7, 7, 8, 6, 6, 7, 8, 9, 10, 10, 11),  # G
        (3, 3, 4, 4, 5, 6, 6, 6, 5, 5, 6, 6, 7, 8, 9, 10),  # H
        (4, 5, 5, 5, 8, 8, 9, 10, 7, 7, 8, 9, 10, 12, 13, 15),  # I
        (3, 4, 4, 4, 6, 7, 7, 8, 5, 6, 7, 8, 9, 10, 11, 12),  # J
        (3, 3, 3, 3, 5, 5, 6, 6, 4, 5, 5, 6, 7, 8, 9, 10),  # K
        (2, 2, 3, 3, 4, 4, 5, 5, 4, 4, 4, 5, 6, 6, 7, 8),  # L
        (3, 4, 4, 4, 6, 7, 7, 8, 5, 6, 7, 8, 9, 10, 11, 13),  # M
        (3, 3, 3, 3, 5, 5, 6, 6, 4, 5, 5, 6, 7, 8, 9, 10),  # N
        (2, 2, 2, 3, 4, 4, 5, 5, 3, 4, 4, 5, 6, 6, 7, 8),  # O
        (2, 2, 2, 2, 3, 3, 4, 4, 3, 3, 3, 4, 4, 5, 6, 7),  # P
        (2, 3, 3, 3, 5, 5, 6, 7, 4, 5, 6, 6, 7, 8, 10, 11),  # Q
        (2, 2, 2, 3, 4, 4, 5, 5, 3, 4, 4, 5, 6, 7, 8, 9),  # R
        (1, 2, 2, 2, 3, 3, 4, 4, 2, 3, 3, 4, 4, 5, 6, 7),  # S
        (1, 1, 1, 1, 2, 2, 3, 3, 2, 2, 3, 3, 3, 4, 5, 5),  # T
        (2, 2, 2, 3, 4, 4, 5, 6, 3, 4, 5, 5, 6, 7, 8, 10),  # U
        (1, 2, 2, 2, 3, 3, 4, 4, 2, 3, 3, 4, 5, 5, 6, 8),  # V
        (1, 1, 1, 1, 2, 3, 3, 3, 2, 2, 3, 3, 3, 4, 5, 6),  # W
        (1, 1, 1, 1, 2, 2, 2, 2, 1, 2, 2, 2, 3, 3, 4, 5),  # X
    ),
    "moderate": (
        (10, 10, 11, 12, 15, 16, 17, 18, 14, 15, 17, 18, 20, 22, 23, 25),  # A
        (8, 9, 9, 9, 13, 13, 14, 15, 12, 13, 14, 15, 17, 18, 20, 21),  # B
        (7, 7, 7, 8, 10, 11, 12, 12, 10, 11, 12, 13, 14, 15, 17, 18),  # C
        (5, 6, 6, 6, 9, 9, 9, 10, 8, 9, 10, 10, 12, 13, 14, 15),  # D
        (7, 8, 8, 9, 12, 13, 14, 15, 11, 12, 13, 15, 17, 18, 20, 22),  # E
        (6, 6, 7, 7, 10, 11, 11, 12, 9, 10, 11, 12, 14, 15, 17, 18),  # F
        (5, 5, 5, 6, 8, 8, 9, 10, 7, 8, 9, 10, 11, 13, 14, 15),  # G
        (4, 4, 4, 5, 6, 7, 7, 8, 6, 7, 7, 8, 9, 10, 11, 12),  # H
        (5, 6, 6, 7, 10, 11, 11, 12, 9, 10, 11, 12, 14, 16, 17, 20),  # I
        (4, 4, 5, 5, 8, 8, 9, 10, 7, 8, 9, 10, 11, 13, 14, 16),  # J
        (3, 3, 4, 4, 6, 7, 7, 8, 5, 6, 7, 8, 9, 10, 11, 13),  # K
        (3, 3, 3, 3, 5, 5, 6, 6, 4, 5, 6, 6, 7, 8, 9, 10),  # L
        (4, 4, 5, 5, 8, 8, 9, 10, 7, 8, 9, 10, 11, 13, 15, 17),  # M
        (3, 3, 4, 4, 6, 6, 7, 8, 5, 6, 7, 8, 9, 10, 12, 14),  # N
        (2, 2, 3, 3, 5, 5, 6, 6, 4, 5, 5, 6, 7, 8, 9, 11),  # O
        (2, 2, 2, 2, 3, 4, 4, 5, 3, 4, 4, 5, 5, 6, 7, 8),  # P
        (3, 3, 3, 4, 6, 7, 8, 9, 5, 6, 7, 8, 9, 11, 13, 15),  # Q
        (2, 2, 3, 3, 5, 5, 6, 6, 4, 5, 5, 6, 7, 8, 10, 12),  # R
        (2, 2, 2, 2, 3, 4, 4, 5, 3, 4, 4, 5, 5, 7, 8, 9),  # S
        (1, 1, 1, 2, 3, 3, 3, 4, 2, 3, 3, 4, 4, 5, 6, 7),  # T
        (2, 2, 3, 3, 5, 5, 6, 7, 4, 5, 6, 7, 8, 9, 11, 13),  # U
        (1, 2, 2, 2, 3, 4, 5, 5, 3, 4, 4, 5, 6, 7, 8, 10),  # V
        (1, 1, 1, 2, 3, 3, 3, 4, 2, 3, 3, 4, 4, 5, 6, 8),  # W
        (1, 1, 1, 1, 2, 2, 2, 3, 2, 2, 2, 3, 3, 4, 5, 6),  # X
    ),
    "high": (
        (15, 16, 17, 18, 26, 27, 29, 30, 17, 18, 20, 22, 25, 28, 30, 32),  # A
        (12, 13, 14, 14, 21, 22, 23, 24, 14, 15, 16, 18, 21, 23, 25, 27),  # B
        (10, 10, 11, 11, 16, 17, 18, 19, 11, 12, 13, 15, 17, 19, 20, 22),  # C
        (8, 8, 8, 9, 13, 14, 14, 15, 9, 10, 11, 12, 14, 15, 17, 18),  # D
        (11, 11, 12, 13, 20, 21, 23, 25, 13, 14, 16, 18, 20, 23, 25, 28),  # E
        (8, 9, 9, 10, 15, 16, 18, 19, 10, 11, 13, 14, 16, 18, 20, 23),  # F
        (6, 7, 7, 8, 12, 13, 14, 15, 8, 9, 10, 11, 13, 15, 16, 18),  # G
        (5, 5, 6, 6, 9, 10, 11, 11, 6, 7, 8, 9, 10, 12, 13, 15),  # H
        (7, 8, 9, 10, 15, 16, 18, 20, 9, 11, 12, 14, 16, 19, 21, 24),  # I
        (5, 6, 7, 7, 11, 12, 14, 15, 7, 8, 10, 11, 13, 15, 17, 19),  # J
        (4, 4, 5, 5, 8, 9, 10, 11, 6, 6, 7, 9, 10, 11, 13, 15),  # K
        (3, 3, 4, 4, 6, 7, 8, 8, 4, 5, 6, 7, 8, 9, 10, 12),  # L
        (5, 5, 6, 7, 11, 13, 14, 16, 7, 8, 10, 11, 13, 15, 18, 21),  # M
        (3, 4, 4, 5, 8, 9, 10, 12, 5, 6, 7, 9, 10, 12, 14, 16),  # N
        (3, 3, 3, 4, 6, 7, 8, 9, 4, 5, 5, 6, 7, 9, 10, 12),  # O
        (2, 2, 2, 3, 4, 5, 6, 6, 3, 3, 4, 5, 6, 7, 8, 9),  # P
        (3, 4, 4, 5, 8, 10, 11, 13, 5, 6, 8, 9, 10, 13, 15, 18),  # Q
        (2, 3, 3, 4, 6, 7, 8, 9, 4, 5, 6, 7, 8, 9, 11, 14),  # R
        (2, 2, 2, 2, 4, 5, 6, 6, 3, 3, 4, 5, 6, 7, 8, 10),  # S
        (1, 1, 2, 2, 3, 3, 4, 5, 2, 2, 3, 4, 4, 5, 6, 7),  # T
        (2, 3, 3, 4, 6, 7, 9, 10, 4, 5, 6, 7, 8, 10, 13, 16),  # U
        (1, 2, 2, 2, 4, 5, 6, 7, 3, 3, 4, 5, 6, 7, 9, 11),  # V
        (1, 1, 1, 2, 3, 4, 4, 5, 2, 2, 3, 4, 4, 5, 7, 8),  # W
        (1, 1, 1, 1, 2, 2, 3, 3, 1, 2, 2, 3, 3, 4, 5, 6),  # X
    ),
    "very_high": (
        (27, 28, 30, 31, 41, 42, 44, 46, 26, 28, 30, 32, 36, 39, 42, 44),  # A
        (22, 23, 24, 26, 34, 36, 37, 39, 22, 24, 26, 27, 31, 33, 36, 38),  # B
        (18, 19, 20, 21, 28, 30, 31, 33, 18, 20, 21, 23, 26, 28, 30, 33),  # C
        (15, 16, 16, 17, 23, 24, 26, 27, 15, 17, 18, 19, 22, 24, 26, 28),  # D
        (20, 21, 22, 24, 33, 35, 37, 39, 20, 23, 25, 27, 31, 33, 36, 40),  # E
        (16, 17, 18, 19, 27, 29, 30, 32, 17, 19, 20, 22, 25, 28, 31, 33),  # F
        (12, 13, 14, 15, 22, 23, 25, 26, 14, 15, 17, 18, 21, 23, 25, 28),  # G
        (10, 11, 11, 12, 17, 18, 20, 21, 11, 12, 14, 15, 17, 19, 21, 23),  # H
        (14, 15, 17, 18, 26, 28, 31, 33, 16, 18, 20, 23, 25, 28, 32, 35),  # I
        (11, 12, 13, 14, 21, 23, 24, 26, 13, 14, 16, 18, 21, 23, 26, 29),  # J
        (8, 9, 10, 11, 16, 18, 19, 21, 10, 11, 13, 15, 17, 19, 21, 24),  # K
        (7, 7, 8, 9, 13, 14, 15, 16, 8, 9, 10, 12, 13, 15, 17, 19),  # L
        (10, 11, 12, 14, 21, 23, 25, 28, 12, 14, 16, 19, 21, 24, 28, 31),  # M
        (8, 9, 9, 11, 16, 18, 19, 22, 10, 11, 13, 15, 17, 19, 22, 25),  # N
        (6, 6, 7, 8, 12, 13, 15, 17, 7, 9, 10, 12, 13, 15, 17, 20),  # O
        (4, 5, 5, 6, 9, 10, 11, 13, 6, 7, 8, 9, 10, 12, 14, 16),  # P
        (7, 8, 9, 10, 16, 18, 21, 23, 9, 11, 13, 16, 17, 20, 24, 28),  # Q
        (5, 6, 7, 8, 12, 14, 15, 17, 7, 8, 10, 12, 13, 16, 18, 22),  # R
        (4, 4, 5, 6, 9, 10, 12, 13, 5, 6, 8, 9, 10, 12, 14, 17),  # S
        (3, 3, 4, 4, 7, 8, 9, 10, 4, 5, 6, 7, 8, 9, 11, 13),  # T
        (5, 6, 7, 8, 13, 15, 17, 19, 7, 9, 11, 13, 14, 17, 20, 24),  # U
        (4, 4, 5, 6, 9, 11, 12, 14, 5, 6, 8, 10, 11, 13, 16, 19),  # V
        (3, 3, 3, 4, 7, 8, 9, 10, 4, 5, 6, 7, 8, 10, 12, 14),  # W
        (2, 2, 2, 3, 5, 6, 6, 7, 3, 4, 4, 5, 6, 7, 9, 11),  # X
    ),
}

# SCORE2-OP, ages 70+: 4 age bands x 4 systolic bands, 4 non-HDL bands
SCORE2_OP = {
    "low": (
        (28, 29, 30, 31, 31, 32, 33, 34, 29, 35, 42, 49, 29, 35, 42, 49),  # A
        (26, 27, 28, 29, 29, 30, 31, 32, 28, 33, 40, 47, 27, 33, 40, 47),  # B
        (24, 25, 26, 27, 27, 28, 29, 30, 26, 32, 38, 45, 26, 32, 38, 45),  # C
        (23, 24, 25, 26, 25, 26, 27, 28, 25, 30, 36, 43, 25, 30, 36, 43),  # D
        (20, 21, 22, 23, 25, 26, 28, 29, 23, 27, 32, 37, 26, 31, 36, 41),  # E
        (18, 19, 20, 21, 23, 24, 25, 26, 21, 25, 29, 34, 24, 28, 33, 38),  # F
        (16, 17, 18, 19, 20, 21, 22, 23, 19, 22, 26, 31, 22, 25, 30, 34),  # G
        (15, 15, 16, 17, 18, 19, 20, 21, 17, 20, 24, 28, 19, 23, 27, 31),  # H
        (15, 15, 16, 17, 21, 22, 23, 24, 19, 21, 24, 27, 24, 27, 31, 34),  # I
        (13, 13, 14, 15, 18, 19, 20, 21, 16, 18, 21, 23, 21, 23, 26, 30),  # J
        (11, 11, 12, 13, 15, 16, 17, 18, 14, 15, 18, 20, 18, 20, 23, 26),  # K
        (9, 10, 10, 11, 13, 14, 15, 15, 12, 13, 15, 17, 15, 17, 19, 22),  # L
        (10, 11, 12, 12, 17, 18, 19, 20, 15, 16, 18, 19, 22, 24, 26, 28),  # M
        (9, 9, 10, 10, 14, 15, 16, 16, 12, 13, 14, 16, 18, 19, 21, 23),  # N
        (7, 7, 8, 8, 11, 12, 13, 14, 10, 11, 12, 13, 14, 16, 17, 19),  # O
        (6, 6, 6, 7, 9, 10, 10, 11, 8, 8, 9, 10, 12, 13, 14, 15),  # P
    ),
    "moderate": (
        (37, 39, 40, 42, 41, 43, 44, 46, 37, 45, 53, 62, 37, 45, 53, 61),  # A
        (35, 36, 38, 39, 39, 40, 42, 43, 36, 43, 51, 59, 35, 43, 51, 59),  # B
        (32, 34, 35, 37, 36, 38, 39, 41, 34, 41, 49, 57, 34, 41, 48, 57),  # C
        (30, 32, 33, 34, 34, 35, 37, 38, 32, 39, 47, 55, 32, 39, 46, 55),  # D
        (27, 28, 30, 31, 34, 35, 37, 39, 30, 35, 41, 47, 34, 40, 46, 53),  # E
        (24, 25, 27, 28, 30, 32, 33, 35, 27, 32, 37, 43, 31, 36, 42, 48),  # F
        (21, 22, 24, 25, 27, 28, 30, 31, 25, 29, 34, 40, 28, 33, 38, 44),  # G
        (19, 20, 21, 22, 24, 25, 27, 28, 22, 26, 31, 36, 25, 30, 35, 40),  # H
        (19, 20, 21, 23, 27, 29, 30, 32, 24, 27, 31, 35, 31, 35, 39, 44),  # I
        (16, 17, 18, 19, 24, 25, 26, 28, 21, 23, 27, 30, 27, 30, 34, 38),  # J
        (14, 15, 15, 16, 20, 21, 22, 24, 17, 20, 23, 26, 23, 26, 29, 33),  # K
        (12, 12, 13, 14, 17, 18, 19, 20, 15, 17, 19, 22, 19, 22, 25, 29),  # L
        (13, 14, 15, 16, 22, 23, 25, 26, 19, 21, 23, 25, 28, 31, 34, 36),  # M
        (11, 11, 12, 13, 18, 19, 20, 22, 15, 17, 18, 20, 23, 25, 28, 30),  # N
        (9, 9, 10, 11, 15, 16, 17, 18, 12, 13, 15, 16, 19, 20, 22, 24),  # O
        (7, 7, 8, 8, 12, 13, 13, 14, 10, 11, 12, 13, 15, 16, 18, 20),  # P
    ),
    "high": (
        (53, 55, 57, 58, 58, 59, 61, 63, 42, 49, 57, 65, 41, 49, 56, 65),  # A
        (50, 52, 54, 55, 55, 56, 58, 60, 40, 47, 55, 63, 40, 47, 54, 62),  # B
        (47, 49, 51, 52, 52, 53, 55, 57, 38, 45, 53, 61, 38, 45, 52, 60),  # C
        (44, 46, 48, 50, 49, 51, 52, 54, 36, 43, 51, 58, 36, 43, 50, 58),  # D
        (40, 42, 44, 45, 49, 51, 53, 55, 34, 40, 45, 51, 38, 44, 50, 56),  # E
        (36, 38, 39, 41, 44, 46, 48, 50, 31, 36, 42, 47, 35, 40, 46, 52),  # F
        (32, 34, 36, 37, 40, 42, 44, 46, 29, 33, 38, 44, 32, 37, 42, 48),  # G
        (29, 31, 32, 34, 36, 38, 40, 41, 26, 30, 35, 40, 29, 34, 39, 44),  # H
        (29, 31, 32, 34, 41, 43, 45, 47, 28, 32, 35, 39, 35, 39, 44, 48),  # I
        (25, 27, 28, 29, 35, 37, 39, 41, 24, 27, 31, 34, 31, 34, 38, 43),  # J
        (22, 23, 24, 25, 31, 32, 34, 36, 21, 24, 27, 30, 27, 30, 34, 37),  # K
        (18, 19, 20, 22, 26, 28, 29, 31, 18, 20, 23, 26, 23, 26, 29, 33),  # L
        (21, 22, 24, 25, 33, 35, 37, 39, 23, 25, 27, 29, 33, 35, 38, 41),  # M
        (17, 18, 19, 20, 28, 29, 31, 33, 19, 20, 22, 24, 27, 29, 32, 34),  # N
        (14, 15, 36, 17, 23, 24, 26, 27, 15, 17, 18, 20, 22, 24, 26, 28),  # O
        (11, 12, 13, 14, 19, 20, 21, 22, 12, 14, 15, 16, 18, 20, 22, 23),  # P
    ),
    "very_high": (
        (62, 63, 64, 65, 65, 66, 67, 68, 49, 54, 59, 64, 49, 54, 59, 64),  # A
        (60, 61, 62, 63, 63, 64, 65, 66, 48, 53, 58, 63, 48, 53, 58, 63),  # B
        (58, 59, 60, 61, 61, 62, 63, 65, 47, 52, 56, 61, 47, 52, 56, 61),  # C
        (56, 57, 58, 60, 59, 60, 61, 63, 46, 50, 55, 60, 46, 50, 55, 60),  # D
        (53, 54, 55, 57, 59, 60, 62, 63, 44, 48, 52, 56, 47, 51, 55, 59),  # E
        (50, 51, 52, 54, 56, 57, 59, 60, 42, 46, 49, 53, 45, 49, 52, 56),  # F
        (47, 48, 49, 51, 53, 54, 56, 57, 40, 43, 47, 51, 43, 46, 50, 54),  # G
        (44, 45, 47, 48, 50, 51, 53, 54, 38, 41, 45, 48, 40, 44, 48, 51),  # H
        (44, 46, 47, 48, 53, 55, 56, 58, 40, 42, 45, 48, 45, 48, 51, 54),  # I
        (41, 42, 43, 45, 49, 51, 52, 53, 37, 39, 42, 44, 42, 44, 47, 50),  # J
        (37, 39, 40, 41, 46, 47, 48, 49, 34, 36, 39, 41, 39, 41, 44, 47),  # K
        (34, 35, 36, 37, 42, 43, 44, 46, 31, 33, 36, 38, 36, 38, 41, 43),  # L
        (37, 38, 39, 41, 48, 49, 51, 52, 35, 37, 39, 40, 43, 45, 47, 49),  # M
        (33, 34, 35, 36, 43, 44, 46, 47, 32, 33, 35, 36, 39, 41, 42, 44),  # N
        (29, 30, 31, 32, 39, 40, 41, 43, 28, 30, 31, 33, 35, 36, 38, 40),  # O
        (26, 27, 28, 29, 34, 36, 37, 38, 25, 26, 28, 29, 31, 33, 34, 36),  # P
    ),
}

# SCORE 2016, ages 40-65: 5 age bands x 4 systolic bands, 5 cholesterol bands
SCORE_2016 = {
    "low": (
        (4, 5, 6, 6, 7, 9, 9, 11, 12, 14, 8, 9, 10, 12, 14, 15, 17, 20, 23, 26),  # A
        (3, 3, 4, 4, 5, 6, 6, 7, 8, 10, 5, 6, 7, 8, 10, 10, 12, 14, 16, 19),  # B
        (2, 2, 2, 3, 3, 4, 4, 5, 6, 7, 4, 4, 5, 6, 7, 7, 8, 9, 11, 13),  # C
        (1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 2, 3, 3, 4, 5, 5, 5, 6, 8, 9),  # D
        (3, 3, 3, 4, 4, 5, 5, 6, 7, 8, 5, 6, 7, 8, 9, 10, 11, 13, 15, 18),  # E
        (2, 2, 2, 2, 3, 3, 4, 4, 5, 5, 3, 4, 5, 5, 6, 7, 8, 9, 11, 13),  # F
        (1, 1, 1, 2, 2, 2, 2, 3, 3, 4, 2, 3, 3, 4, 4, 5, 5, 6, 7, 9),  # G
        (1, 1, 1, 1, 1, 1, 2, 2, 2, 3, 2, 2, 2, 3, 3, 3, 4, 4, 5, 6),  # H
        (1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 3, 4, 4, 5, 6, 6, 7, 8, 10, 12),  # I
        (1, 1, 1, 1, 1, 2, 2, 2, 3, 3, 2, 2, 3, 3, 4, 4, 5, 6, 7, 8),  # J
        (1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 1, 2, 2, 2, 3, 3, 3, 4, 5, 6),  # K
        (0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 4),  # L
        (1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 4, 4, 4, 5, 6, 7),  # M
        (0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 4, 5),  # N
        (0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3),  # O
        (0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2),  # P
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 2, 2),  # Q
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1),  # R
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1),  # S
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1),  # T
    ),
    "high": (
        (7, 8, 9, 10, 12, 13, 15, 17, 19, 22, 14, 16, 19, 22, 26, 26, 30, 35, 41, 47),  # A
        (5, 5, 6, 7, 8, 9, 10, 12, 13, 16, 9, 11, 13, 15, 16, 18, 21, 25, 29, 34),  # B
        (3, 3, 4, 5, 6, 6, 7, 8, 9, 11, 6, 8, 9, 11, 13, 13, 15, 17, 20, 24),  # C
        (2, 2, 3, 3, 4, 4, 5, 5, 6, 7, 4, 5, 6, 7, 9, 9, 10, 12, 14, 17),  # D
        (4, 4, 5, 6, 7, 8, 9, 10, 11, 13, 9, 11, 13, 15, 18, 18, 21, 24, 28, 33),  # E
        (3, 3, 3, 4, 5, 5, 6, 7, 8, 9, 6, 7, 9, 10, 12, 12, 14, 17, 20, 24),  # F
        (2, 2, 2, 3, 3, 3, 4, 5, 5, 6, 4, 5, 6, 7, 9, 8, 10, 12, 14, 17),  # G
        (1, 1, 2, 2, 2, 2, 3, 3, 4, 4, 3, 3, 4, 5, 6, 6, 7, 8, 10, 12),  # H
        (2, 2, 3, 3, 4, 4, 5, 5, 6, 7, 6, 7, 8, 10, 12, 12, 13, 16, 19, 22),  # I
        (1, 2, 2, 2, 3, 3, 3, 4, 4, 5, 4, 5, 6, 7, 8, 8, 9, 11, 13, 16),  # J
        (1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 4, 5, 6, 5, 6, 8, 9, 11),  # K
        (1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 4, 4, 4, 5, 6, 8),  # L
        (1, 1, 1, 2, 2, 2, 2, 3, 3, 4, 4, 4, 5, 6, 7, 7, 8, 10, 12, 14),  # M
        (1, 1, 1, 1, 1, 1, 2, 2, 2, 3, 2, 3, 3, 4, 5, 5, 6, 7, 8, 10),  # N
        (0, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 4, 5, 6, 7),  # O
        (0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 4, 5),  # P
        (0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 4),  # Q
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 2, 2, 2, 3),  # R
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 2, 2),  # S
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1),  # T
    ),
}

# SCORE Germany 2016: 6 age bands x 4 systolic bands, 5 cholesterol bands
SCORE_GER_2016 = (
    (4, 5, 6, 7, 8, 8, 9, 11, 13, 15, 9, 11, 13, 15, 18, 18, 21, 25, 29, 34),  # A
    (3, 3, 4, 5, 5, 5, 7, 8, 9, 11, 7, 8, 9, 11, 13, 13, 15, 18, 21, 25),  # B
    (2, 2, 3, 3, 4, 4, 5, 5, 6, 8, 5, 5, 6, 8, 9, 9, 11, 13, 15, 18),  # C
    (1, 2, 2, 2, 3, 3, 3, 4, 4, 5, 3, 4, 4, 5, 6, 6, 8, 9, 11, 13),  # D
    (2, 2, 3, 4, 4, 4, 5, 6, 7, 8, 6, 7, 8, 10, 11, 11, 13, 16, 19, 22),  # E
    (1, 2, 2, 2, 3, 3, 4, 4, 5, 6, 4, 5, 6, 7, 8, 8, 9, 11, 13, 16),  # F
    (1, 1, 1, 2, 2, 2, 2, 3, 3, 4, 3, 3, 4, 5, 6, 6, 7, 8, 9, 11),  # G
    (1, 1, 1, 1, 1, 1, 2, 2, 2, 3, 2, 2, 3, 3, 4, 4, 5, 5, 7, 8),  # H
    (1, 1, 2, 2, 2, 2, 3, 3, 4, 5, 3, 4, 5, 6, 7, 7, 8, 10, 12, 14),  # I
    (1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 2, 3, 3, 4, 5, 5, 6, 7, 8, 10),  # J
    (1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 3, 3, 3, 4, 5, 6, 7),  # K
    (0, 0, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 2, 2, 2, 2, 3, 3, 4, 5),  # L
    (1, 1, 1, 1, 1, 1, 2, 2, 2, 3, 2, 2, 3, 3, 4, 4, 4, 5, 6, 7),  # M
    (0, 1, 1, 1, 1, 1, 1, 1, 2, 2, 1, 1, 2, 2, 3, 3, 3, 4, 4, 5),  # N
    (0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 3, 3, 4),  # O
    (0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2),  # P
    (0, 0, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 2, 2, 2, 2, 3, 3, 4, 5),  # Q
    (0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3),  # R
    (0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2),  # S
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 1, 1, 1, 1, 1, 1, 2),  # T
    (0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2),  # U
    (0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 1, 1, 1, 1, 1, 1, 1, 2),  # V
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1),  # W
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1),  # X
)

# SCORE older persons, ages 65-80: 3 age bands x 4 systolic bands, 5 cholesterol bands
SCORE_OP = {
    "low": (
        (12, 12, 13, 13, 14, 19, 19, 20, 21, 22, 17, 18, 20, 22, 24, 28, 30, 32, 35, 39),  # A
        (10, 11, 11, 12, 12, 16, 17, 18, 19, 20, 15, 16, 17, 19, 21, 25, 26, 29, 31, 35),  # B
        (9, 9, 10, 10, 11, 14, 15, 16, 16, 17, 13, 14, 15, 17, 19, 22, 23, 25, 28, 31),  # C
        (8, 8, 8, 9, 9, 12, 13, 14, 14, 15, 11, 12, 13, 15, 16, 19, 21, 22, 25, 27),  # D
        (6, 6, 6, 6, 7, 9, 9, 10, 10, 11, 9, 10, 11, 12, 14, 16, 17, 19, 21, 23),  # E
        (5, 5, 5, 6, 6, 8, 8, 9, 9, 10, 8, 9, 10, 11, 12, 14, 15, 16, 18, 20),  # F
        (4, 4, 5, 5, 5, 7, 7, 8, 8, 8, 7, 8, 8, 9, 10, 12, 13, 14, 16, 18),  # G
        (4, 4, 4, 4, 4, 6, 6, 7, 7, 7, 6, 7, 7, 8, 9, 10, 11, 13, 14, 16),  # H
        (3, 3, 3, 3, 3, 4, 4, 5, 5, 5, 5, 5, 6, 7, 8, 9, 9, 10, 12, 13),  # I
        (2, 2, 2, 3, 3, 4, 4, 4, 4, 5, 4, 5, 5, 6, 7, 7, 8, 9, 10, 11),  # J
        (2, 2, 2, 2, 2, 3, 3, 4, 4, 4, 4, 4, 4, 5, 6, 6, 7, 8, 9, 10),  # K
        (2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 5, 6, 6, 7, 8, 9),  # L
    ),
    "high": (
        (18, 19, 20, 21, 22, 28, 29, 31, 33, 35, 23, 26, 30, 33, 38, 38, 42, 46, 52, 57),  # A
        (16, 16, 17, 18, 19, 25, 26, 28, 29, 31, 21, 23, 26, 30, 34, 34, 37, 42, 46, 52),  # B
        (14, 14, 15, 16, 17, 22, 23, 24, 26, 27, 18, 20, 23, 26, 30, 30, 33, 37, 42, 47),  # C
        (12, 13, 13, 14, 15, 19, 20, 22, 23, 24, 16, 18, 20, 23, 26, 26, 29, 33, 37, 42),  # D
        (9, 9, 10, 10, 11, 14, 15, 16, 17, 18, 13, 15, 17, 20, 23, 22, 25, 29, 32, 37),  # E
        (7, 8, 8, 9, 9, 12, 13, 14, 15, 16, 12, 13, 15, 17, 20, 20, 22, 25, 29, 33),  # F
        (7, 7, 7, 8, 8, 11, 11, 12, 13, 14, 10, 11, 13, 15, 17, 17, 19, 22, 25, 29),  # G
        (6, 6, 6, 7, 7, 9, 10, 11, 11, 12, 9, 10, 11, 13, 15, 15, 17, 19, 22, 25),  # H
        (4, 4, 5, 5, 5, 7, 7, 8, 8, 9, 7, 8, 10, 11, 13, 13, 14, 17, 19, 22),  # I
        (4, 4, 4, 4, 4, 6, 6, 7, 7, 8, 6, 7, 8, 10, 11, 11, 13, 14, 17, 19),  # J
        (3, 3, 3, 4, 4, 5, 5, 6, 6, 7, 6, 6, 7, 8, 10, 10, 11, 13, 15, 17),  # K
        (3, 3, 3, 3, 3, 4, 5, 5, 5, 6, 5, 5, 6, 7, 9, 8, 10, 11, 13, 15),  # L
    ),
}
