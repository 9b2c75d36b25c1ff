"""
Module d'écriture des résultats pour KMPP.
Sauvegarde les jeux de données, les centres et les affectations au format CSV.
"""

import os
import numpy as np
from typing import Tuple


def _format_for(array: np.ndarray) -> str:
    return "%d" if np.issubdtype(array.dtype, np.integer) else "%.18g"


def write_csv(points: np.ndarray, file_path: str) -> None:
    """
    Écrit des points dans un fichier CSV (une ligne par point).

    Args:
        points: Tableau numpy (shape: [n, N]) ou (shape: [n])
        file_path: Chemin du fichier de sortie
    """
    points = np.asarray(points)
    os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)
    np.savetxt(file_path, points, delimiter=",", fmt=_format_for(points))


def write_results(centers: np.ndarray, clusters: np.ndarray, output_prefix: str, verbose: bool = False) -> Tuple[str, str]:
    """
    Sauvegarde le résultat d'un clustering.

    Écrit <output_prefix>.centers.csv (un centre par ligne, ligne i = cluster i)
    et <output_prefix>.labels.csv (une affectation par ligne, dans l'ordre des points).

    Args:
        centers: Centres (shape: [k, N])
        clusters: Affectations (shape: [n])
        output_prefix: Préfixe des fichiers de sortie
        verbose: Afficher les chemins écrits

    Returns:
        Tuple[str, str]: (chemin des centres, chemin des affectations)
    """
    centers_path = f"{output_prefix}.centers.csv"
    labels_path = f"{output_prefix}.labels.csv"

    write_csv(centers, centers_path)
    write_csv(np.asarray(clusters).reshape(-1, 1), labels_path)

    if verbose:
        print(f"✓ {len(centers)} centres écrits dans {centers_path}")
        print(f"✓ {len(clusters):,} affectations écrites dans {labels_path}")

    return centers_path, labels_path
