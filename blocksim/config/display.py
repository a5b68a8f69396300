"""Display and preview configuration constants."""

# Preview window dimensions in pixels
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 640

# The frame rate for the preview loop, in frames per second
FRAME_RATE = 30

# Width of the separator lines in headless log output
SEPARATOR_WIDTH = 60

# Background color of the preview window (RGB 0-255)
BACKGROUND_COLOR = (12, 12, 18)

# Ambient term added to every face before lighting
AMBIENT_LIGHT = 0.25

# Vertical field of view of the preview camera, in degrees
CAMERA_FOV_DEGREES = 60.0

# Camera orbit speed in radians per frame while an arrow key is held
CAMERA_ORBIT_SPEED = 0.03
