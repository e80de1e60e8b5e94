# odecompare/display.py

import logging

import matplotlib.image as mpimg
import matplotlib.pyplot as plt

from .errors import DisplayError

WINDOW_TITLE = "Euler's Method Graph - ESC to exit"
QUIT_KEY = "escape"
POLL_INTERVAL = 0.05


def load_artifact(path):
    """Reads a rendered PNG back into an (height, width, channels) array."""
    try:
        return mpimg.imread(path)
    except (OSError, ValueError, SyntaxError) as exc:
        raise DisplayError(f"Could not open rendered chart '{path}': {exc}") from exc


class GraphWindow:
    """
    A single matplotlib window showing an image at its native pixel size.
    The window counts as open until it is closed or `quit_key` is pressed.
    """
    def __init__(self, image, title=WINDOW_TITLE, quit_key=QUIT_KEY):
        self.image = image
        self.quit_key = quit_key
        self.quit_requested = False

        height, width = image.shape[:2]
        dpi = plt.rcParams['figure.dpi']
        # No toolbar, so the window is exactly the size of the image.
        with plt.rc_context({'toolbar': 'None'}):
            self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        ax = self.fig.add_axes([0, 0, 1, 1])
        ax.imshow(image)
        ax.set_axis_off()
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(title)
        self.fig.canvas.mpl_connect('key_press_event', self.on_key_press)

    @property
    def interactive(self):
        # Non-GUI canvases (Agg, PDF, ...) declare no interactive framework.
        return self.fig.canvas.required_interactive_framework is not None

    def on_key_press(self, event):
        if event.key == self.quit_key:
            self.quit_requested = True

    def is_open(self):
        return plt.fignum_exists(self.fig.number) and not self.quit_requested

    def update(self):
        self.fig.canvas.draw_idle()
        plt.pause(POLL_INTERVAL)

    def close(self):
        plt.close(self.fig)


def run_window(window):
    """Redraws the window until it is closed or its quit key is pressed."""
    while window.is_open():
        window.update()
    window.close()


def display(artifact, quit_key=QUIT_KEY):
    """Reopens the rendered artifact and blocks while it is shown."""
    image = load_artifact(artifact.path)
    height, width = image.shape[:2]
    if (width, height) != (artifact.width, artifact.height):
        raise DisplayError(
            f"Rendered chart is {width}x{height} but {artifact.width}x{artifact.height} was requested."
        )

    try:
        window = GraphWindow(image, quit_key=quit_key)
        if not window.interactive:
            window.close()
            raise DisplayError(f"Matplotlib backend '{plt.get_backend()}' cannot open a window; use --no-display.")
        logging.info(f"Showing {artifact.path}; press {quit_key.upper()} or close the window to exit.")
        run_window(window)
    except DisplayError:
        raise
    except Exception as exc:
        # GUI toolkits raise their own error types (e.g. tkinter.TclError).
        raise DisplayError(f"Failed to show chart window: {exc}") from exc
    logging.info("Chart window closed.")
