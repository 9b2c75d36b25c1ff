"""
Initialisation k-means++ des centres.
Sélectionne k points du jeu de données en favorisant les points éloignés des centres déjà choisis.
"""

import numpy as np
from typing import Optional

from kmpp.core.distance import closest_distance
from kmpp.core.engine import LinearCongruentialEngine, resolve_seed
from kmpp.core.points import as_points


def random_plusplus(data: np.ndarray, k: int, seed: Optional[int] = None) -> np.ndarray:
    """
    Initialisation K-means++.

    Args:
        data: Points à partitionner (shape: [n, N], n >= k)
        k: Nombre de centres à sélectionner (k >= 1)
        seed: Graine du générateur. None = graine tirée de l'entropie du système

    Returns:
        np.ndarray: Centres initiaux (shape: [k, N]), copiés depuis les données
    """
    data = as_points(data)
    n = data.shape[0]
    if k < 1:
        raise ValueError(f"k doit être supérieur à zéro, reçu {k}")
    if n < k:
        raise ValueError(f"k ({k}) ne peut pas dépasser le nombre de points ({n})")

    rand_engine = LinearCongruentialEngine(resolve_seed(seed))

    means = np.empty((k, data.shape[1]), dtype=data.dtype)

    # Choisir le premier centre uniformément
    means[0] = data[rand_engine.randint(n)]

    for count in range(1, k):
        # Distance au centre le plus proche pour chaque point
        distances = closest_distance(means[:count], data)

        # Tirage pondéré par le carré de la distance
        index = rand_engine.discrete(distances)
        if index == len(distances):
            # Arrondi flottant sur la masse de probabilité
            index = 0

        means[count] = data[index]

    return means
