"""
Interface en ligne de commande pour KMPP.
Fournit des commandes pour générer des données de test et partitionner un jeu de données.
"""

import sys
import argparse
from typing import List, Optional

from kmpp import __version__
from kmpp.core.convergence import CONVERGENCE_METRICS
from kmpp.utils.config import ConfigManager
from kmpp.utils.cli_cluster import cluster_command
from kmpp.utils.cli_generate import generate_command

def _config_path_from(argv: Optional[List[str]]) -> Optional[str]:
    """Extrait --config avant l'analyse complète, pour que les défauts en dépendent."""
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default=None)
    known, _ = pre_parser.parse_known_args(argv)
    return known.config

def main(argv: Optional[List[str]] = None) -> int:
    """
    Point d'entrée principal pour l'interface en ligne de commande.

    Args:
        argv: Arguments (par défaut: sys.argv[1:])

    Returns:
        int: Code de retour (0 pour succès, autre pour erreur)
    """
    config_manager = ConfigManager(_config_path_from(argv))

    kmeans_config = config_manager.get_section("kmeans")

    default_data_path = config_manager.get_file_path("default_data")
    default_output_prefix = config_manager.get_file_path("default_output")

    # Parseur principal
    parser = argparse.ArgumentParser(
        description="KMPP - K-means (algorithme de Lloyd) avec initialisation k-means++",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--config", default=config_manager.config_path,
                        help="Chemin vers le fichier de configuration")
    parser.add_argument("--version", action="version", version=f"KMPP v{__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commandes disponibles")

    # Commande cluster
    cluster_parser = subparsers.add_parser("cluster", help="Partitionner un jeu de données CSV")
    cluster_parser.add_argument("data_file", nargs="?", default=default_data_path,
                       help="Fichier CSV contenant les points (une ligne par point)")
    cluster_parser.add_argument("output_prefix", nargs="?", default=default_output_prefix,
                       help="Préfixe des fichiers de sortie (.centers.csv, .labels.csv)")
    cluster_parser.add_argument("--k", type=int, default=kmeans_config["k"],
                       help="Nombre de clusters")
    cluster_parser.add_argument("--max_iter", type=int, default=kmeans_config["max_iter"],
                       help="Nombre maximal d'itérations")
    cluster_parser.add_argument("--epsilon", type=float, default=kmeans_config["epsilon"],
                       help="Seuil de convergence")
    cluster_parser.add_argument("--seed", type=int, default=kmeans_config["seed"],
                       help="Graine de l'initialisation k-means++ (aléatoire si absente)")
    cluster_parser.add_argument("--n_init", type=int, default=kmeans_config["n_init"],
                       help="Nombre d'exécutions, la plus faible inertie est gardée")
    cluster_parser.add_argument("--convergence", choices=sorted(CONVERGENCE_METRICS),
                       default=kmeans_config["convergence"],
                       help="Métrique de convergence")
    cluster_parser.add_argument("--dtype", default=kmeans_config["dtype"],
                       help="Type numérique des points (ex: float64, float32, int64)")
    cluster_parser.add_argument("--quiet", action="store_true", default=False,
                       help="Ne rien afficher")
    cluster_parser.set_defaults(func=cluster_command)

    # Commande generate
    generate_parser = subparsers.add_parser("generate", help="Générer un jeu de données synthétique")
    generate_parser.add_argument("out_file", nargs="?", default=default_data_path,
                       help="Fichier CSV de sortie")
    generate_parser.add_argument("--n_samples", type=int, default=None,
                       help="Nombre de points (défaut: configuration)")
    generate_parser.add_argument("--n_features", type=int, default=None,
                       help="Dimension des points (défaut: configuration)")
    generate_parser.add_argument("--centers", type=int, default=None,
                       help="Nombre de nuages (défaut: configuration)")
    generate_parser.add_argument("--cluster_std", type=float, default=None,
                       help="Écart-type des nuages (défaut: configuration)")
    generate_parser.add_argument("--seed", type=int, default=None,
                       help="Graine du générateur")
    generate_parser.set_defaults(func=generate_command)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        return args.func(args)
    else:
        parser.print_help()
        return 0

if __name__ == "__main__":
    sys.exit(main())
