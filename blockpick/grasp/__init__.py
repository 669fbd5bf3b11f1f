"""Grasp and placement candidate generation."""

from .candidates import GraspCandidate, PlaceLocation, GripperTranslation, GripperPosture
from .grasp_data import GraspData, load_grasp_data
from .grasp_generator import BlockGraspGenerator, generate_grasp_candidates
from .placement import generate_placement_candidates
