WIDTH = 1280
HEIGHT = 720
FULLSCREEN = False
FPS = 60
VSYNC = True
# Samples per pixel for the default framebuffer (0 disables multisampling)
MSAA_SAMPLES = 4
CLEAR_COLOR = (0.4, 0.4, 0.4, 1.0)
FOV = 45
NEAR_PLANE = 0.1
FAR_PLANE = 1000.0

# Ground footprint: total span along one axis and its minimum x/z coordinate
MAP_SIDE_LEN = 10.0
MIN_X = -5.0

CAMERA_EYE = (-10.0, 10.0, 0.0)
CAMERA_TARGET = (2.5, 0.0, -2.5)

LIGHT_POSITION = (2.5, 10.0, -2.5)
LIGHT_COLOR = (1.0, 0.2, 1.0)
LIGHT_INTENSITY = 2000.0  # lumens
LIGHT_RANGE = 11.0
LIGHT_RADIUS = 10.0
# Flat ambient term so faces turned away from the light stay readable
AMBIENT_LIGHT = (0.15, 0.15, 0.15, 1.0)

GROUND_COLOR = (1.0, 1.0, 1.0)
WIREFRAME_COLOR = (0.0, 0.0, 0.0)

# Print setup phase timings to stdout
LOG_TIMING = True
