"""
Métriques de convergence entre deux itérations de l'algorithme de Lloyd.
"""

import numpy as np
from typing import Callable, Dict

from kmpp.core.distance import distance


def _check_same_shape(means_a: np.ndarray, means_b: np.ndarray) -> None:
    if means_a.shape != means_b.shape:
        raise ValueError(
            f"Les deux collections de centres doivent avoir la même forme: {means_a.shape} != {means_b.shape}"
        )


def point_collection_epsilon(means_a: np.ndarray, means_b: np.ndarray) -> float:
    """
    Dérive globale entre deux collections de centres.

    Chaque collection est réduite à un point agrégé (moyenne, dimension par
    dimension, de tous ses centres), puis on retourne la distance euclidienne
    entre les deux points agrégés. Des déplacements de centres qui se
    compensent d'un cluster à l'autre laissent cette mesure proche de zéro.

    Args:
        means_a: Centres de l'itération courante (shape: [k, N])
        means_b: Centres de l'itération précédente (shape: [k, N])

    Returns:
        float: Distance entre les deux points agrégés
    """
    means_a = np.asarray(means_a)
    means_b = np.asarray(means_b)
    _check_same_shape(means_a, means_b)

    aggregate_a = np.mean(means_a, axis=0)
    aggregate_b = np.mean(means_b, axis=0)
    return float(distance(aggregate_a, aggregate_b))


def max_center_shift(means_a: np.ndarray, means_b: np.ndarray) -> float:
    """Plus grand déplacement individuel d'un centre entre deux itérations."""
    means_a = np.asarray(means_a)
    means_b = np.asarray(means_b)
    _check_same_shape(means_a, means_b)

    # Calcul en flottant pour ne pas tronquer les petits déplacements entiers
    shifts = distance(means_a.astype(np.float64), means_b.astype(np.float64))
    return float(np.max(shifts))


CONVERGENCE_METRICS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "aggregate": point_collection_epsilon,
    "max_shift": max_center_shift,
}


def get_convergence_metric(name: str) -> Callable[[np.ndarray, np.ndarray], float]:
    """
    Retourne la métrique de convergence associée à un nom.

    Args:
        name: "aggregate" (dérive globale, défaut) ou "max_shift"

    Returns:
        La fonction de métrique
    """
    try:
        return CONVERGENCE_METRICS[name]
    except KeyError:
        raise ValueError(
            f"Métrique de convergence inconnue: {name!r} (choix: {', '.join(CONVERGENCE_METRICS)})"
        ) from None
