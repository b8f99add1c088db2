# Configuration Module - Procedural approach with module-level variables
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Application info
API_TITLE = os.getenv("API_TITLE", "Postural Measurement API")
API_VERSION = os.getenv("API_VERSION", "1.0.0")

# Database Configuration
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./posture_measurements.db")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Photo views a trainer can mark landmarks on
PHOTO_TYPES = ["front", "back", "side_left", "side_right"]

# Anatomical landmark vocabulary per view, in marking order
LANDMARKS_BY_PHOTO_TYPE = {
    "front": [
        "Topo da cabeça",
        "Queixo",
        "Orelha esquerda",
        "Orelha direita",
        "Ombro esquerdo",
        "Ombro direito",
        "C7 (base do pescoço)",
        "Centro da pelve",
        "Crista ilíaca esquerda",
        "Crista ilíaca direita",
        "Joelho esquerdo",
        "Joelho direito",
        "Tornozelo esquerdo",
        "Tornozelo direito",
        "Quadril esquerdo",
        "Quadril direito",
    ],
    "side_left": [
        "Topo da cabeça",
        "Queixo",
        "C7 (base do pescoço)",
        "Centro da pelve",
        "Quadril esquerdo",
        "Joelho esquerdo",
        "Tornozelo esquerdo",
    ],
    "side_right": [
        "Topo da cabeça",
        "Queixo",
        "C7 (base do pescoço)",
        "Centro da pelve",
        "Quadril direito",
        "Joelho direito",
        "Tornozelo direito",
    ],
    "back": [
        "Topo da cabeça",
        "Ombro esquerdo",
        "Ombro direito",
        "Crista ilíaca esquerda",
        "Crista ilíaca direita",
        "Joelho esquerdo",
        "Joelho direito",
        "Tornozelo esquerdo",
        "Tornozelo direito",
    ],
}

# Severity thresholds in degrees: (moderate, severe)
MEASUREMENT_THRESHOLDS = {
    "head_vertical_alignment": (5, 10),
    "head_horizontal_level": (3, 6),
    "shoulders_horizontal_level": (3, 6),
    "trunk_vertical_alignment": (5, 10),
    "pelvis_horizontal_level": (2, 5),
    "femur_horizontal_level": (2, 5),
    "tibia_horizontal_level": (3, 6),
    "knees_valgus_varus_symmetry": (3, 6),
}

# Used for any measurement type missing from the table above
DEFAULT_THRESHOLD = (3, 6)

# Severity bands, mildest first
STATUS_LEVELS = ["acceptable", "moderate", "severe"]
