"""
Générateur pseudo-aléatoire congruentiel linéaire pour l'initialisation k-means++.
Une instance est locale à un appel d'initialisation: aucun état aléatoire global.
"""

import os
import numpy as np
from typing import Optional

# Paramètres de Knuth (MMIX), module 2^64 - 1
LCG_MULTIPLIER = 6364136223846793005
LCG_INCREMENT = 1442695040888963407
LCG_MODULUS = 2 ** 64 - 1


def resolve_seed(seed: Optional[int] = None) -> int:
    """
    Résout la graine effective d'une exécution.

    Args:
        seed: Graine explicite, ou None pour tirer 64 bits de l'entropie du système

    Returns:
        int: La graine à utiliser
    """
    if seed is None:
        return int.from_bytes(os.urandom(8), "little")
    return int(seed)


class LinearCongruentialEngine:
    """
    Moteur x <- (a * x + c) mod m.
    Reproductible: une même graine produit toujours la même séquence.
    """

    def __init__(self, seed: int):
        """
        Initialise le moteur.

        Args:
            seed: Graine entière (réduite modulo m)
        """
        self.state = int(seed) % LCG_MODULUS

    def next(self) -> int:
        """Avance le moteur et retourne un entier dans [0, m)."""
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state

    def random(self) -> float:
        """Flottant uniforme dans [0, 1), construit sur les 53 bits de poids fort."""
        return (self.next() >> 11) * 2.0 ** -53

    def randint(self, n: int) -> int:
        """
        Entier uniforme dans [0, n).

        Args:
            n: Borne supérieure exclue (n >= 1)

        Returns:
            int: L'entier tiré
        """
        if n < 1:
            raise ValueError(f"randint exige n >= 1, reçu {n}")
        return min(int(self.random() * n), n - 1)

    def discrete(self, weights: np.ndarray) -> int:
        """
        Tire un indice avec une probabilité proportionnelle à son poids.

        L'indice peut valoir len(weights) lorsque l'arrondi flottant laisse la
        dernière probabilité cumulée sous le tirage; l'appelant décide du repli.
        Si tous les poids sont nuls, le tirage est uniforme.

        Args:
            weights: Poids positifs ou nuls (shape: [n])

        Returns:
            int: Indice tiré, dans [0, len(weights)]
        """
        weights = np.asarray(weights, dtype=np.float64)
        total = np.sum(weights)
        if total > 0:
            probabilities = weights / total
        else:
            probabilities = np.ones(len(weights)) / len(weights)

        cumulative_probs = np.cumsum(probabilities)
        r = self.random()
        return int(np.searchsorted(cumulative_probs, r, side="right"))
