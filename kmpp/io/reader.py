"""
Module de lecture des jeux de données pour KMPP.
Charge des points depuis un fichier CSV (une ligne par point, valeurs séparées par des virgules).
"""

import os
import time
import numpy as np
from typing import Union

from kmpp.core.points import as_points, check_numeric_dtype


def load_csv(file_path: str, dtype: Union[str, np.dtype] = "float64", verbose: bool = False) -> np.ndarray:
    """
    Charge un jeu de données depuis un fichier CSV.

    Args:
        file_path: Chemin du fichier CSV
        dtype: Type numérique des points (entier signé ou flottant)
        verbose: Afficher la progression

    Returns:
        np.ndarray: Points (shape: [n, N])

    Raises:
        FileNotFoundError: Si le fichier n'existe pas
        ValueError: Si le fichier contient des lignes non numériques ou de longueurs différentes
    """
    dtype = check_numeric_dtype(dtype)
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Fichier de données introuvable: {file_path}")

    start_time = time.time()
    if verbose:
        print(f"⏳ Chargement des points depuis {file_path}...")

    points = np.loadtxt(file_path, delimiter=",", dtype=dtype, ndmin=2)
    if points.size == 0:
        raise ValueError(f"Aucun point dans {file_path}")
    points = as_points(points)

    if verbose:
        elapsed = time.time() - start_time
        print(f"✓ {len(points):,} points (dim {points.shape[1]}) chargés [terminé en {elapsed:.2f}s]")

    return points
