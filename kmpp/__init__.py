# KMPP - K-means (algorithme de Lloyd) avec initialisation k-means++

__version__ = "1.0.0"

# Import main components for direct API access
from kmpp.core.distance import distance, distance_squared
from kmpp.core.convergence import point_collection_epsilon
from kmpp.builder.seeding import random_plusplus
from kmpp.builder.lloyd import calculate_clusters, calculate_means, kmeans_lloyd, cluster
from kmpp.utils.metrics import get_cluster, means_inertia, get_best_means
