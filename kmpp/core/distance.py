"""
Primitives de distance euclidienne pour KMPP.
Tous les calculs intermédiaires restent dans le type des points (pas d'élargissement).
"""

import numpy as np


def distance_squared(point_a: np.ndarray, point_b: np.ndarray) -> np.ndarray:
    """
    Calcule le carré de la distance euclidienne entre deux points.

    La somme porte sur le dernier axe, ce qui permet aussi de calculer une
    distance entre chaque point d'un tableau et un même centre (ex: data et means[j]).

    Args:
        point_a: Premier point (ou tableau de points)
        point_b: Second point (ou tableau de points)

    Returns:
        Le carré de la distance, dans le type des points
    """
    point_a = np.asarray(point_a)
    point_b = np.asarray(point_b)
    delta = point_a - point_b
    return np.sum(delta * delta, axis=-1, dtype=delta.dtype)


def distance(point_a: np.ndarray, point_b: np.ndarray) -> np.ndarray:
    """Distance euclidienne entre deux points."""
    return np.sqrt(distance_squared(point_a, point_b))


def distance_matrix_squared(data: np.ndarray, means: np.ndarray) -> np.ndarray:
    """
    Matrice (n, k) des carrés des distances entre chaque point et chaque centre.

    Args:
        data: Points (shape: [n, N])
        means: Centres (shape: [k, N])

    Returns:
        np.ndarray: Matrice des distances au carré (shape: [n, k])
    """
    data = np.asarray(data)
    means = np.asarray(means)
    result = np.empty((data.shape[0], means.shape[0]), dtype=np.result_type(data, means))

    # Une colonne par centre: la mémoire temporaire reste de l'ordre de n x N
    for j in range(means.shape[0]):
        result[:, j] = distance_squared(data, means[j])
    return result


def closest_distance(means: np.ndarray, data: np.ndarray) -> np.ndarray:
    """
    Pour chaque point, le carré de la distance au centre le plus proche.

    Args:
        means: Centres déjà choisis (shape: [m, N], m >= 1)
        data: Points (shape: [n, N])

    Returns:
        np.ndarray: Distances minimales au carré (shape: [n])
    """
    return distance_matrix_squared(data, means).min(axis=1)
