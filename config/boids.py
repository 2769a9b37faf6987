"""Configuration for the planar boids flocking simulation."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Boids"
}

CAMERA = {
    "fov": 45.0,                        # Vertical field of view (degrees)
    "near_clip": 0.1,
    "far_clip": 500.0,
    "initial_position": (0.0, 10.0, 10.0),
    "initial_target": (0.0, 0.0, 0.0),
    "view_direction": (0.0, 1.0, 1.0),  # Offset from flock center, normalized
}

GROUND = {
    "size": 15.0,
    "color": (0.85, 0.85, 0.88),
    "bounds_color": (0.35, 0.35, 0.45)
}

BOIDS = {
    "count": 200,
    "seed": None,

    # Spawning
    "spawn_range": 5.0,         # Horizontal positions in [-range, range]
    "spawn_speed": 0.1,         # Velocity components in [-speed, speed]
    "height": 0.4,              # Fixed vertical coordinate

    # Perception
    "view_range": 2.5,
    "separation_distance": 0.6,
    "field_of_view": 120.0,     # Full cone angle (degrees)
    "use_view_cone": True,

    # Steering
    "max_speed": 3.0,
    "cohesion_weight": 0.001,
    "alignment_weight": 0.01,
    "wall_strength": 0.05,
    "world_bounds": (-7.5, 7.5, -7.5, 7.5),   # x_min, x_max, z_min, z_max

    # Banking
    "lean_gain": 40.0,          # Radians of lean per unit of acceleration
    "max_lean": 45.0,           # Degrees
    "lean_epsilon": 1e-6,

    # Rendering
    "size": (0.15, 0.8, 0.15),  # Box scale (x, y, z)
    "color": (0.6, 0.8, 0.2),
}

HEADLESS = {
    "ticks": 600,
    "dt": 1.0 / 60.0,
    "report_every": 60,
}

COLORS = {
    "background": (0.05, 0.06, 0.09, 1.0),
    "text": (0.9, 0.9, 0.9)
}
