#!/usr/bin/env python3
"""
Tests des outils autour du clustering: métriques, configuration,
lecture/écriture CSV, exécution simplifiée et ligne de commande.
"""

import os
import sys
import tempfile
import numpy as np

from kmpp import cluster, get_cluster, means_inertia, get_best_means
from kmpp.builder.builder import run_clustering
from kmpp.cli import main as cli_main
from kmpp.io.reader import load_csv
from kmpp.io.writer import write_csv, write_results
from kmpp.utils.cli_generate import generate_blobs
from kmpp.utils.config import ConfigManager, DEFAULT_CONFIG, load_config


def _raises(exc_type, func, *args, **kwargs):
    try:
        func(*args, **kwargs)
    except exc_type:
        return True
    return False


def _two_groups():
    return np.array([[0.0, 0.0], [1.0, 1.0], [8.0, 8.0], [9.0, 9.0]])


def test_get_cluster():
    """Teste l'extraction des points d'un cluster."""
    print("\n--- Test des métriques ---")
    data = np.array([[0.0], [2.0], [10.0], [3.0]])
    clusters = np.array([0, 0, 1, 0])
    np.testing.assert_array_equal(get_cluster(data, clusters, 0), [[0.0], [2.0], [3.0]])
    np.testing.assert_array_equal(get_cluster(data, clusters, 1), [[10.0]])
    assert len(get_cluster(data, clusters, 2)) == 0
    assert _raises(ValueError, get_cluster, data, clusters[:2], 0)


def test_means_inertia():
    """Teste le calcul de l'inertie."""
    data = np.array([[0.0], [2.0], [10.0]])
    result = (np.array([[1.0], [10.0]]), np.array([0, 0, 1]))
    assert means_inertia(data, result, 2) == 2.0

    # Un cluster vide ne contribue pas
    result = (np.array([[1.0], [10.0], [50.0]]), np.array([0, 0, 1]))
    assert means_inertia(data, result, 3) == 2.0
    assert _raises(ValueError, means_inertia, data, result, 2)
    print("✓ Test des métriques OK")


def test_get_best_means():
    """La meilleure exécution a l'inertie minimale parmi les graines essayées."""
    print("\n--- Test de la sélection de la meilleure exécution ---")
    data = generate_blobs(300, 2, 6, cluster_std=1.5, seed=0)
    k, n_init, seed = 6, 4, 100

    best = get_best_means(data, k, n_init, 100, seed=seed)
    single_inertias = [
        means_inertia(data, cluster(data, k, 100, seed=seed + i), k)
        for i in range(n_init)
    ]
    assert means_inertia(data, best, k) == min(single_inertias)

    # Reproductible
    again = get_best_means(data, k, n_init, 100, seed=seed)
    np.testing.assert_array_equal(best[0], again[0])
    np.testing.assert_array_equal(best[1], again[1])

    unseeded = get_best_means(data, k, 2, 100, verbose=True)
    assert unseeded[0].shape == (k, 2)

    assert _raises(ValueError, get_best_means, data, k, 0, 100)
    print("✓ Test de la sélection de la meilleure exécution OK")


def test_config_defaults():
    """Un fichier absent donne la configuration par défaut."""
    print("\n--- Test de la configuration ---")
    with tempfile.TemporaryDirectory() as tmp_dir:
        config_manager = ConfigManager(os.path.join(tmp_dir, "absent.yaml"))
    assert config_manager.get("kmeans", "k") == DEFAULT_CONFIG["kmeans"]["k"]
    assert config_manager.get("kmeans", "seed") is None
    assert config_manager.get("kmeans", "missing", 7) == 7
    assert config_manager.get_section("unknown") == {}

    # Les défauts ne sont pas partagés entre instances
    config_manager.config["kmeans"]["k"] = 99
    assert DEFAULT_CONFIG["kmeans"]["k"] != 99


def test_config_partial_file():
    """Un fichier partiel est complété avec les valeurs par défaut."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("kmeans:\n  k: 3\n  seed: 17\nfiles:\n  output_dir: out\n")

        config_manager = load_config(config_path)
        assert config_manager.get("kmeans", "k") == 3
        assert config_manager.get("kmeans", "seed") == 17
        assert config_manager.get("kmeans", "max_iter") == DEFAULT_CONFIG["kmeans"]["max_iter"]
        assert config_manager.get_section("generate")["centers"] == DEFAULT_CONFIG["generate"]["centers"]
        assert config_manager.get_file_path("default_output") == os.path.join("out", "result")
        assert config_manager.get_file_path("default_data") == os.path.join(".", "data.csv")
        assert config_manager.get_file_path("output_dir") == "out"

        with open(config_path, "w") as f:
            f.write("kmeans:\n  k: 5\n")
        config_manager.reload()
        assert config_manager.get("kmeans", "k") == 5
        assert config_path in str(config_manager)

        # Contenu YAML qui n'est pas un dictionnaire
        with open(config_path, "w") as f:
            f.write("- 1\n- 2\n")
        config_manager.reload()
        assert config_manager.get("kmeans", "k") == DEFAULT_CONFIG["kmeans"]["k"]
    print("✓ Test de la configuration OK")


def test_csv_io():
    """Teste la lecture et l'écriture CSV."""
    print("\n--- Test de la lecture/écriture CSV ---")
    with tempfile.TemporaryDirectory() as tmp_dir:
        data_path = os.path.join(tmp_dir, "data.csv")
        points = np.array([[0.25, -1.0, 3.0], [4.0, 5.5, -6.0]])
        write_csv(points, data_path)
        np.testing.assert_array_equal(load_csv(data_path), points)

        int_path = os.path.join(tmp_dir, "ints.csv")
        with open(int_path, "w") as f:
            f.write("1,2\n-3,4\n")
        ints = load_csv(int_path, dtype="int32", verbose=True)
        assert ints.dtype == np.int32
        np.testing.assert_array_equal(ints, [[1, 2], [-3, 4]])

        # Un seul point
        one_path = os.path.join(tmp_dir, "one.csv")
        with open(one_path, "w") as f:
            f.write("1.5,2.5\n")
        assert load_csv(one_path).shape == (1, 2)

        bad_path = os.path.join(tmp_dir, "bad.csv")
        with open(bad_path, "w") as f:
            f.write("1,2\n3\n")
        assert _raises(ValueError, load_csv, bad_path)
        assert _raises(FileNotFoundError, load_csv, os.path.join(tmp_dir, "absent.csv"))
        assert _raises(TypeError, load_csv, data_path, dtype="uint8")
    print("✓ Test de la lecture/écriture CSV OK")


def test_write_results():
    with tempfile.TemporaryDirectory() as tmp_dir:
        prefix = os.path.join(tmp_dir, "sub", "run")
        centers_path, labels_path = write_results(
            np.array([[0.5, 0.5], [8.5, 8.5]]), np.array([0, 0, 1, 1]), prefix, verbose=True
        )
        assert centers_path == prefix + ".centers.csv"
        assert labels_path == prefix + ".labels.csv"
        np.testing.assert_array_equal(load_csv(centers_path), [[0.5, 0.5], [8.5, 8.5]])
        with open(labels_path) as f:
            assert [line.strip() for line in f] == ["0", "0", "1", "1"]


def test_run_clustering():
    """Teste l'exécution simplifiée avec configuration et paramètres explicites."""
    print("\n--- Test de l'exécution simplifiée ---")
    config = {"kmeans": {"k": 2, "max_iter": 10, "seed": 0}}
    means, clusters = run_clustering(_two_groups(), config=config, verbose=True)
    np.testing.assert_allclose(means[np.argsort(means[:, 0])], [[0.5, 0.5], [8.5, 8.5]])
    assert clusters[0] == clusters[1] != clusters[2] == clusters[3]

    # Les paramètres explicites sont prioritaires
    means, _ = run_clustering(_two_groups(), config=config, k=1, verbose=False)
    np.testing.assert_allclose(means, [[4.5, 4.5]])

    with tempfile.TemporaryDirectory() as tmp_dir:
        data_path = os.path.join(tmp_dir, "data.csv")
        write_csv(_two_groups(), data_path)
        prefix = os.path.join(tmp_dir, "result")
        means, clusters = run_clustering(data_path, output_prefix=prefix, config=config, n_init=3, verbose=False)
        assert os.path.exists(prefix + ".centers.csv")
        assert os.path.exists(prefix + ".labels.csv")
        np.testing.assert_allclose(means[np.argsort(means[:, 0])], [[0.5, 0.5], [8.5, 8.5]])
    print("✓ Test de l'exécution simplifiée OK")


def test_cli_generate_and_cluster():
    """Teste les commandes generate et cluster de bout en bout."""
    print("\n--- Test de la ligne de commande ---")
    with tempfile.TemporaryDirectory() as tmp_dir:
        config_path = os.path.join(tmp_dir, "absent.yaml")
        data_path = os.path.join(tmp_dir, "blobs.csv")
        prefix = os.path.join(tmp_dir, "out")

        code = cli_main(["--config", config_path, "generate", data_path,
                         "--n_samples", "60", "--n_features", "2", "--centers", "3", "--seed", "0"])
        assert code == 0
        assert load_csv(data_path).shape == (60, 2)

        code = cli_main(["--config", config_path, "cluster", data_path, prefix,
                         "--k", "3", "--max_iter", "50", "--seed", "1", "--quiet"])
        assert code == 0
        assert load_csv(prefix + ".centers.csv").shape == (3, 2)
        labels = load_csv(prefix + ".labels.csv", dtype="int64")
        assert labels.shape == (60, 1)
        assert labels.min() >= 0 and labels.max() < 3

        code = cli_main(["--config", config_path, "cluster", data_path, prefix,
                         "--k", "2", "--seed", "1", "--n_init", "2", "--convergence", "max_shift"])
        assert code == 0

        # Erreurs: fichier absent, k trop grand
        assert cli_main(["--config", config_path, "cluster", os.path.join(tmp_dir, "absent.csv"), prefix]) == 1
        assert cli_main(["--config", config_path, "cluster", data_path, prefix, "--k", "100", "--quiet"]) == 1

        assert cli_main(["--config", config_path]) == 0
    print("✓ Test de la ligne de commande OK")


def main():
    """Fonction principale pour exécuter les tests."""
    print("=== Tests des outils KMPP ===")

    try:
        test_get_cluster()
        test_means_inertia()
        test_get_best_means()
        test_config_defaults()
        test_config_partial_file()
        test_csv_io()
        test_write_results()
        test_run_clustering()
        test_cli_generate_and_cluster()

        print("\n✅ TOUS LES TESTS ONT RÉUSSI")
        return 0
    except Exception as e:
        print(f"\n❌ ERREUR: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1

if __name__ == "__main__":
    sys.exit(main())
