from bwdelaunay.triangulation.bowyer_watson import BowyerWatson, Insertion, compute_delaunay
from bwdelaunay.triangulation.super_triangle import enclosing_triangle
