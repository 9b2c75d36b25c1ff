"""
Exécution simplifiée d'un clustering KMPP.
Une seule fonction qui fait tout: chargement, clustering, inertie, sauvegarde.
"""

import time
from typing import Optional, Union, Dict, Any, Tuple
import numpy as np

from kmpp.utils.config import ConfigManager
from kmpp.builder.lloyd import kmeans_lloyd
from kmpp.io.reader import load_csv
from kmpp.io.writer import write_results


def run_clustering(
    data: Union[np.ndarray, str],
    output_prefix: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
    k: Optional[int] = None,
    max_iter: Optional[int] = None,
    epsilon: Optional[float] = None,
    seed: Optional[int] = None,
    n_init: Optional[int] = None,
    convergence: Optional[str] = None,
    dtype: Optional[str] = None,
    verbose: bool = True
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Partitionne un jeu de données en une seule fonction.

    Cette fonction fait tout:
    1. Chargement des points si un chemin est fourni
    2. K-means (une ou plusieurs exécutions)
    3. Calcul de l'inertie
    4. Sauvegarde des centres et des affectations si output_prefix est fourni

    Les paramètres explicites sont prioritaires sur la configuration.

    Args:
        data: Soit un tableau numpy de points, soit un chemin vers un fichier CSV
        output_prefix: Préfixe des fichiers de sortie (facultatif, sinon pas de sauvegarde)
        config: Configuration personnalisée (facultatif, sinon utilise config.yaml)
        k: Nombre de clusters (facultatif)
        max_iter: Nombre maximal d'itérations (facultatif)
        epsilon: Seuil de convergence (facultatif)
        seed: Graine de l'initialisation (facultatif)
        n_init: Nombre d'exécutions, la meilleure inertie est gardée (facultatif)
        convergence: Métrique de convergence (facultatif)
        dtype: Type numérique utilisé pour charger un fichier CSV (facultatif)
        verbose: Afficher les messages de progression

    Returns:
        Tuple[np.ndarray, np.ndarray]: (centroids, labels)
    """
    # Importation locale pour éviter les dépendances circulaires
    from kmpp.utils.metrics import get_best_means, means_inertia

    # 1. Charger la configuration
    if config is None:
        kmeans_config = ConfigManager().get_section("kmeans")
    else:
        kmeans_config = config.get("kmeans", {})

    # 2. Utiliser les paramètres explicites ou les valeurs de configuration
    k = k if k is not None else kmeans_config.get("k", 8)
    max_iter = max_iter if max_iter is not None else kmeans_config.get("max_iter", 300)
    epsilon = epsilon if epsilon is not None else kmeans_config.get("epsilon", 0.0)
    seed = seed if seed is not None else kmeans_config.get("seed")
    n_init = n_init if n_init is not None else kmeans_config.get("n_init", 1)
    convergence = convergence if convergence is not None else kmeans_config.get("convergence", "aggregate")
    dtype = dtype if dtype is not None else kmeans_config.get("dtype", "float64")

    # 3. Préparer les points
    if isinstance(data, str):
        points = load_csv(data, dtype=dtype, verbose=verbose)
    else:
        points = data

    start_time = time.time()
    if verbose:
        seed_str = "aléatoire" if seed is None else str(seed)
        print(f"⏳ Clustering avec k={k}, max_iter={max_iter}, epsilon={epsilon}, "
              f"seed={seed_str}, n_init={n_init}, convergence={convergence}")

    # 4. Clustering
    if n_init > 1:
        result = get_best_means(
            points, k, n_init, max_iter,
            seed=seed,
            epsilon=epsilon,
            convergence=convergence,
            verbose=verbose
        )
    else:
        result = kmeans_lloyd(
            points, k, max_iter,
            seed=seed,
            epsilon=epsilon,
            convergence=convergence,
            verbose=verbose
        )
    centers, clusters = result

    # 5. Statistiques
    if verbose:
        elapsed = time.time() - start_time
        sizes = np.bincount(clusters, minlength=k)
        print(f"✓ Clustering terminé en {elapsed:.2f}s")
        print(f"  → Statistiques des clusters:")
        print(f"     - Inertie              : {means_inertia(points, result, k):.4f}")
        print(f"     - Taille minimale      : {sizes.min()} points")
        print(f"     - Taille maximale      : {sizes.max()} points")
        print(f"     - Clusters vides       : {int(np.sum(sizes == 0))}")

    # 6. Sauvegarde
    if output_prefix:
        write_results(centers, clusters, output_prefix, verbose=verbose)

    return centers, clusters
