"""
Module pour la commande de clustering.
Charge un fichier CSV, exécute k-means et sauvegarde les résultats.
"""

import time
import datetime
import argparse

from kmpp.utils.config import ConfigManager
from kmpp.builder.builder import run_clustering

def format_time(seconds: float) -> str:
    """Formate le temps en heures, minutes, secondes."""
    return str(datetime.timedelta(seconds=int(seconds)))

def cluster_command(args: argparse.Namespace) -> int:
    """
    Commande pour partitionner un jeu de données.

    Args:
        args: Arguments de ligne de commande

    Returns:
        int: Code de retour (0 pour succès, autre pour erreur)
    """
    config_manager = ConfigManager(args.config)
    verbose = not getattr(args, "quiet", False)

    total_start_time = time.time()

    try:
        if verbose:
            print(f"🚀 Clustering k-means (Lloyd + k-means++)...")
            print(f"  - Données: {args.data_file}")
            print(f"  - Sortie: {args.output_prefix}")
            print(f"  - k: {args.k}")
            print(f"  - Itérations max: {args.max_iter}")
            print(f"  - Epsilon: {args.epsilon}")
            print(f"  - Graine: {'aléatoire' if args.seed is None else args.seed}")
            print(f"  - Exécutions: {args.n_init}")

        run_clustering(
            data=args.data_file,
            output_prefix=args.output_prefix,
            config=config_manager.config,
            k=args.k,
            max_iter=args.max_iter,
            epsilon=args.epsilon,
            seed=args.seed,
            n_init=args.n_init,
            convergence=args.convergence,
            dtype=args.dtype,
            verbose=verbose
        )

        if verbose:
            total_time = time.time() - total_start_time
            print(f"\n✓ Clustering terminé en {format_time(total_time)}")

    except Exception as e:
        print(f"\n❌ Erreur: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1

    return 0
