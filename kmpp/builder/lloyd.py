"""
Module de clustering pour KMPP.
Implémente l'algorithme de Lloyd (affectation / mise à jour) initialisé par k-means++.
"""

import time
import numpy as np
from typing import Optional, Tuple, Union

from kmpp.core.convergence import get_convergence_metric
from kmpp.core.distance import distance_matrix_squared
from kmpp.core.points import as_points, check_same_dimension
from kmpp.builder.seeding import random_plusplus


def calculate_clusters(data: np.ndarray, means: np.ndarray) -> np.ndarray:
    """
    Affecte chaque point au centre le plus proche (distance euclidienne).

    En cas d'égalité, le centre d'indice le plus faible est retenu.

    Args:
        data: Points (shape: [n, N])
        means: Centres courants (shape: [k, N], k >= 1)

    Returns:
        np.ndarray: Indice du cluster de chaque point (shape: [n])
    """
    data = as_points(data)
    means = as_points(means, name="means")
    check_same_dimension(data, means)
    if len(means) == 0:
        raise ValueError("Au moins un centre est nécessaire")

    # argmin retourne la première occurrence du minimum
    return np.argmin(distance_matrix_squared(data, means), axis=1).astype(np.int64)


def _divide_counts(sums: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Division des sommes par les effectifs dans le type des points."""
    counts = counts.astype(sums.dtype)
    if np.issubdtype(sums.dtype, np.integer):
        # Division entière tronquée vers zéro
        return np.sign(sums) * (np.abs(sums) // counts)
    return sums / counts


def calculate_means(data: np.ndarray, clusters: np.ndarray, old_means: np.ndarray, k: int) -> np.ndarray:
    """
    Recalcule chaque centre comme le barycentre des points qui lui sont affectés.

    Un cluster vide conserve exactement son centre précédent.

    Args:
        data: Points (shape: [n, N])
        clusters: Indice du cluster de chaque point (shape: [n])
        old_means: Centres de l'itération précédente (shape: [k, N])
        k: Nombre de clusters

    Returns:
        np.ndarray: Nouveaux centres (shape: [k, N])
    """
    data = as_points(data)
    old_means = as_points(old_means, name="old_means")
    check_same_dimension(data, old_means)
    clusters = np.asarray(clusters, dtype=np.int64)

    if len(clusters) != len(data):
        raise ValueError(f"{len(clusters)} affectations pour {len(data)} points")
    if len(old_means) != k:
        raise ValueError(f"{len(old_means)} centres précédents pour k={k}")

    counts = np.bincount(clusters, minlength=k)
    sums = np.zeros((k, data.shape[1]), dtype=data.dtype)
    np.add.at(sums, clusters, data)

    means = old_means.astype(data.dtype, copy=True)
    non_empty = counts > 0
    means[non_empty] = _divide_counts(sums[non_empty], counts[non_empty][:, np.newaxis])
    return means


def kmeans_lloyd(
    data: np.ndarray,
    k: int,
    max_iter: int,
    seed: Optional[int] = None,
    epsilon: float = 0.0,
    convergence: str = "aggregate",
    verbose: bool = False,
    return_n_iter: bool = False,
) -> Union[Tuple[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray, int]]:
    """
    K-means par l'algorithme de Lloyd avec initialisation k-means++.

    Les affectations retournées sont celles calculées à la dernière itération,
    c'est-à-dire par rapport aux centres avant leur dernière mise à jour.

    Args:
        data: Les points à partitionner (shape: [n, N]), type entier signé ou flottant
        k: Nombre de clusters (1 <= k <= n)
        max_iter: Nombre maximal d'itérations (>= 1)
        seed: Graine de l'initialisation. None = non déterministe
        epsilon: Seuil de convergence sur la métrique de dérive
        convergence: "aggregate" (dérive globale des centres) ou "max_shift"
        verbose: Afficher la progression
        return_n_iter: Retourner aussi le nombre d'itérations effectuées

    Returns:
        Tuple[np.ndarray, np.ndarray]: (centroids, labels), ou
        (centroids, labels, n_iter) si return_n_iter
    """
    data = as_points(data)
    n = data.shape[0]
    if k < 1:
        raise ValueError(f"k doit être supérieur à zéro, reçu {k}")
    if max_iter < 1:
        raise ValueError(f"max_iter doit être supérieur à zéro, reçu {max_iter}")
    if n < k:
        raise ValueError(f"k ({k}) ne peut pas dépasser le nombre de points ({n})")
    metric = get_convergence_metric(convergence)

    start_time = time.time()
    if verbose:
        print(f"⏳ K-means (Lloyd + k-means++) avec k={k} sur {n:,} points de dimension {data.shape[1]}...")

    means = random_plusplus(data, k, seed)

    count = 0
    while True:
        clusters = calculate_clusters(data, means)
        old_means = means
        means = calculate_means(data, clusters, old_means, k)
        count += 1

        drift = metric(means, old_means)
        if verbose:
            print(f"  → Itération {count}: dérive={drift:.6g}")
        if drift <= epsilon or count >= max_iter:
            break

    if verbose:
        elapsed = time.time() - start_time
        status = "convergé" if drift <= epsilon else "limite d'itérations atteinte"
        print(f"✓ K-means terminé en {count} itération(s) ({status}) [terminé en {elapsed:.2f}s]")

    if return_n_iter:
        return means, clusters, count
    return means, clusters


def cluster(
    data: np.ndarray,
    k: int,
    max_iter: int,
    seed: Optional[int] = None,
    epsilon: float = 0.0,
    **kwargs
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Point d'entrée principal: partitionne `data` en `k` clusters.

    Args:
        data: Les points (shape: [n, N])
        k: Nombre de clusters
        max_iter: Nombre maximal d'itérations
        seed: Graine optionnelle (exécution déterministe si fournie)
        epsilon: Seuil de convergence
        **kwargs: Options supplémentaires de kmeans_lloyd (convergence, verbose, return_n_iter)

    Returns:
        Tuple[np.ndarray, np.ndarray]: (centroids, labels)
    """
    return kmeans_lloyd(data, k, max_iter, seed=seed, epsilon=epsilon, **kwargs)
