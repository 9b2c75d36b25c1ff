"""
Module pour la génération de données synthétiques.
Produit des nuages gaussiens (scikit-learn) pour essayer le clustering sans jeu de données.
"""

import argparse
import time
from typing import Optional

import numpy as np
from sklearn.datasets import make_blobs

from kmpp.utils.config import ConfigManager
from kmpp.io.writer import write_csv

def generate_blobs(
    n_samples: int,
    n_features: int,
    centers: int,
    cluster_std: float = 1.0,
    seed: Optional[int] = None
) -> np.ndarray:
    """
    Génère des points répartis en nuages gaussiens isotropes.

    Args:
        n_samples: Nombre de points
        n_features: Dimension des points
        centers: Nombre de nuages
        cluster_std: Écart-type de chaque nuage
        seed: Graine du générateur (None = non déterministe)

    Returns:
        np.ndarray: Points (shape: [n_samples, n_features])
    """
    points, _ = make_blobs(
        n_samples=n_samples,
        n_features=n_features,
        centers=centers,
        cluster_std=cluster_std,
        random_state=seed
    )
    return points

def generate_command(args: argparse.Namespace) -> int:
    """
    Commande pour générer un jeu de données synthétique.

    Args:
        args: Arguments de ligne de commande

    Returns:
        int: Code de retour (0 pour succès, autre pour erreur)
    """
    config_manager = ConfigManager(args.config)
    generate_config = config_manager.get_section("generate")

    n_samples = args.n_samples if args.n_samples is not None else generate_config["n_samples"]
    n_features = args.n_features if args.n_features is not None else generate_config["n_features"]
    centers = args.centers if args.centers is not None else generate_config["centers"]
    cluster_std = args.cluster_std if args.cluster_std is not None else generate_config["cluster_std"]

    try:
        start_time = time.time()
        print(f"⏳ Génération de {n_samples:,} points (dim {n_features}) en {centers} nuages...")
        points = generate_blobs(n_samples, n_features, centers, cluster_std, seed=args.seed)
        write_csv(points, args.out_file)
        elapsed = time.time() - start_time
        print(f"✓ {len(points):,} points écrits dans {args.out_file} [terminé en {elapsed:.2f}s]")
    except Exception as e:
        print(f"\n❌ Erreur: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1

    return 0
