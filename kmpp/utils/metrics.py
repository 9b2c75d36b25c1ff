"""
Outils d'analyse des résultats de clustering pour KMPP.
Extraction d'un cluster, inertie, et sélection du meilleur résultat parmi plusieurs exécutions.
"""

import numpy as np
from typing import Optional, Tuple
from tqdm.auto import tqdm

from kmpp.builder.lloyd import kmeans_lloyd
from kmpp.core.engine import resolve_seed
from kmpp.core.points import as_points


def get_cluster(data: np.ndarray, clusters: np.ndarray, label: int) -> np.ndarray:
    """
    Retourne les points affectés à un cluster donné.

    Args:
        data: Points (shape: [n, N])
        clusters: Indice du cluster de chaque point (shape: [n])
        label: Indice du cluster recherché

    Returns:
        np.ndarray: Les points du cluster, dans l'ordre du jeu de données
    """
    data = as_points(data)
    clusters = np.asarray(clusters)
    if len(clusters) != len(data):
        raise ValueError(f"{len(clusters)} affectations pour {len(data)} points")
    return data[clusters == label]


def means_inertia(data: np.ndarray, result: Tuple[np.ndarray, np.ndarray], k: int) -> float:
    """
    Somme des carrés des distances de chaque point au centre de son cluster.

    Args:
        data: Points (shape: [n, N])
        result: Tuple (centroids, labels) retourné par kmeans_lloyd
        k: Nombre de clusters

    Returns:
        float: L'inertie (accumulée en float64)
    """
    data = as_points(data)
    means, clusters = result[0], result[1]
    means = np.asarray(means, dtype=np.float64)
    if len(means) != k:
        raise ValueError(f"{len(means)} centres pour k={k}")

    inertia = 0.0
    for i in range(k):
        cluster_points = get_cluster(data, clusters, i).astype(np.float64)
        if len(cluster_points) > 0:
            inertia += float(np.sum((cluster_points - means[i]) ** 2))
    return inertia


def get_best_means(
    data: np.ndarray,
    k: int,
    n_init: int,
    max_iter: int,
    seed: Optional[int] = None,
    epsilon: float = 0.0,
    convergence: str = "aggregate",
    verbose: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Exécute k-means plusieurs fois et garde le résultat de plus faible inertie.

    Avec une graine, l'exécution i utilise la graine seed + i, ce qui rend
    l'ensemble reproductible.

    Args:
        data: Points (shape: [n, N])
        k: Nombre de clusters
        n_init: Nombre d'exécutions (>= 1)
        max_iter: Nombre maximal d'itérations par exécution
        seed: Graine de base, ou None
        epsilon: Seuil de convergence
        convergence: Métrique de convergence
        verbose: Afficher une barre de progression

    Returns:
        Tuple[np.ndarray, np.ndarray]: (centroids, labels) de la meilleure exécution
    """
    if n_init < 1:
        raise ValueError(f"n_init doit être supérieur à zéro, reçu {n_init}")
    data = as_points(data)

    best_result = None
    best_inertia = np.inf

    for i in tqdm(range(n_init), desc="Exécutions k-means", disable=not verbose):
        run_seed = seed + i if seed is not None else resolve_seed(None)
        result = kmeans_lloyd(
            data, k, max_iter,
            seed=run_seed,
            epsilon=epsilon,
            convergence=convergence
        )
        inertia = means_inertia(data, result, k)
        if best_result is None or inertia < best_inertia:
            best_inertia = inertia
            best_result = result

    if verbose:
        print(f"✓ Meilleure inertie sur {n_init} exécution(s): {best_inertia:.4f}")

    return best_result
