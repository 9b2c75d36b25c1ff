"""
Module de validation des points pour KMPP.
Convertit les jeux de données en tableaux numpy et vérifie les préconditions
(type numérique signé, dimensionnalité commune).
"""

import numpy as np
from typing import Any


def check_numeric_dtype(dtype: np.dtype) -> np.dtype:
    """
    Vérifie que le type numérique est un type arithmétique signé.

    Les entiers signés et les flottants réels sont acceptés. Les entiers non
    signés, les booléens, les complexes et les objets sont refusés.

    Args:
        dtype: Type numpy à vérifier

    Returns:
        np.dtype: Le type vérifié

    Raises:
        TypeError: Si le type n'est pas un type arithmétique signé
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.signedinteger) or np.issubdtype(dtype, np.floating):
        return dtype
    raise TypeError(
        f"Le type des points doit être un type arithmétique signé (entier signé ou flottant), reçu: {dtype}"
    )


def as_points(data: Any, name: str = "data") -> np.ndarray:
    """
    Convertit une collection de points en tableau numpy 2D (n, N).

    Args:
        data: Séquence de points de même dimension (ou tableau numpy)
        name: Nom utilisé dans les messages d'erreur

    Returns:
        np.ndarray: Tableau (n, N) sans copie si `data` est déjà un tableau

    Raises:
        ValueError: Si les points n'ont pas tous la même dimension, ou si N = 0
        TypeError: Si le type numérique n'est pas signé
    """
    try:
        points = np.asarray(data)
    except ValueError as e:
        # Numpy refuse les séquences irrégulières
        raise ValueError(f"{name}: tous les points doivent avoir la même dimension ({e})") from e

    if points.dtype == object:
        raise ValueError(f"{name}: tous les points doivent avoir la même dimension")
    if points.ndim != 2:
        raise ValueError(f"{name}: attendu un tableau 2D (n, N), reçu {points.ndim} dimension(s)")
    if points.shape[1] == 0:
        raise ValueError(f"{name}: les points doivent avoir au moins une dimension")

    check_numeric_dtype(points.dtype)
    return points


def check_same_dimension(data: np.ndarray, means: np.ndarray) -> None:
    """Vérifie que les centres partagent la dimensionnalité des données."""
    if data.shape[1] != means.shape[1]:
        raise ValueError(
            f"Dimension incohérente: données de dimension {data.shape[1]}, centres de dimension {means.shape[1]}"
        )
