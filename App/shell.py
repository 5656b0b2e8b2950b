"""Interactive command shell for configuring and generating ASCII art."""

from typing import Callable, Optional

from ascii_output import ConsoleAsciiOutput, HtmlAsciiOutput
from config_manager import ConfigManager
from exceptions import (
    AsciiArtError,
    CommandError,
    EmptyPaletteError,
    ImageLoadError,
    OutputError,
    ResolutionError,
)
from image_processing import load_image
from image_processing.padding import closest_power_of_two, padded_size
from image_processing.processor import convert_session
from models import (
    MAX_ASCII_VALUE,
    MIN_ASCII_VALUE,
    AsciiArtConfig,
    OutputMode,
    ShellSession,
)

PROMPT = ">>> "

EXIT_COMMAND = "exit"
RUN_ASCII_COMMAND = "asciiArt"
PRINT_CHARS_COMMAND = "chars"
ADD_CHARS_COMMAND = "add"
REMOVE_CHARS_COMMAND = "remove"
RESOLUTION_COMMAND = "res"
IMAGE_COMMAND = "image"
OUTPUT_COMMAND = "output"
SAVE_COMMAND = "save"

ALL_CHARS = "all"
SPACE_CHAR = "space"
RESOLUTION_UP = "up"
RESOLUTION_DOWN = "down"

# Error messages
INVALID_COMMAND_ERR_MSG = "Did not execute due to incorrect command."
LOAD_IMAGE_ERR_MSG = "Did not execute due to problem with image file."
INITIALIZATION_ERR_MSG = "Can not start running due to problem with initialization."
OUTPUT_COMMAND_ERR_MSG = "Did not change output method due to incorrect format."
RESOLUTION_BOUNDARIES_ERR_MSG = "Did not change resolution due to exceeding boundaries."
BAD_RESOLUTION_COMMAND_ERR_MSG = "Did not change resolution due to incorrect format."
ADD_COMMAND_ERR_MSG = "Did not add due to incorrect format."
REMOVE_COMMAND_ERR_MSG = "Did not remove due to incorrect format."
EMPTY_SET_ERR_MSG = "Did not execute. Charset is empty."
SAVE_CONFIG_ERR_MSG = "Did not save settings"


class Shell:
    """Reads user commands and drives the session.

    AIDEV-NOTE: Every command either completes or raises an AsciiArtError
    whose message is printed by run(); errors never end the session.
    """

    def __init__(
        self,
        session: ShellSession,
        config: Optional[AsciiArtConfig] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        self.session = session
        self.config = config or AsciiArtConfig()
        self.config_manager = config_manager or ConfigManager()
        self.output = self._make_output(session.output_mode)

    def run(self, input_func: Callable[[str], str] = input):
        """Read and execute commands until 'exit' or end of input."""
        while True:
            try:
                command = input_func(PROMPT)
            except EOFError:
                break
            if command.strip() == EXIT_COMMAND:
                break
            try:
                self.handle_command(command)
            except AsciiArtError as e:
                print(e)

    def handle_command(self, command: str):
        """Parse and execute a single command.

        Raises:
            AsciiArtError: With a user-facing message if the command fails
        """
        parts = command.split()
        if not parts or len(parts) > 2:
            raise CommandError(INVALID_COMMAND_ERR_MSG)

        name = parts[0]
        if len(parts) == 1:
            if name == PRINT_CHARS_COMMAND:
                self.print_chars()
            elif name == RUN_ASCII_COMMAND:
                self.run_ascii_art()
            elif name == SAVE_COMMAND:
                self.save_settings()
            else:
                raise CommandError(INVALID_COMMAND_ERR_MSG)
            return

        argument = parts[1]
        if name == ADD_CHARS_COMMAND:
            self.update_chars(argument, add=True)
        elif name == REMOVE_CHARS_COMMAND:
            self.update_chars(argument, add=False)
        elif name == RESOLUTION_COMMAND:
            self.change_resolution(argument)
        elif name == IMAGE_COMMAND:
            self.load_image(argument)
        elif name == OUTPUT_COMMAND:
            self.change_output(argument)
        else:
            raise CommandError(INVALID_COMMAND_ERR_MSG)

    # -------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------

    def print_chars(self):
        """Print the palette characters in code-point order."""
        print(" ".join(self.session.palette))

    def update_chars(self, argument: str, add: bool):
        """Add or remove 'all', 'space', a range like 'a-z', or one character."""
        if argument == ALL_CHARS:
            first, last = chr(MIN_ASCII_VALUE), chr(MAX_ASCII_VALUE)
        elif argument == SPACE_CHAR:
            first = last = " "
        elif len(argument) == 3 and argument[1] == "-":
            first, last = argument[0], argument[2]
        elif len(argument) == 1:
            first = last = argument
        else:
            raise CommandError(ADD_COMMAND_ERR_MSG if add else REMOVE_COMMAND_ERR_MSG)

        start, end = sorted((ord(first), ord(last)))
        palette = self.session.palette
        for code in range(start, end + 1):
            if add:
                palette.add(chr(code))
            else:
                palette.remove(chr(code))

    def change_resolution(self, argument: str):
        """Double ('up') or halve ('down') the resolution within bounds."""
        lower, upper = self.session.resolution_bounds()
        if argument == RESOLUTION_UP:
            resolution = self.session.resolution * 2
        elif argument == RESOLUTION_DOWN:
            resolution = self.session.resolution // 2
        else:
            raise ResolutionError(BAD_RESOLUTION_COMMAND_ERR_MSG)

        if not lower <= resolution <= upper:
            raise ResolutionError(RESOLUTION_BOUNDARIES_ERR_MSG)
        self.session.resolution = resolution
        print(f"Resolution set to {resolution}.")

    def load_image(self, path: str):
        """Load a new image and keep the resolution inside its bounds."""
        try:
            image = load_image(path)
            padded_width, padded_height = padded_size(image.width, image.height)
        except AsciiArtError as e:
            raise ImageLoadError(LOAD_IMAGE_ERR_MSG) from e

        session = self.session
        session.image = image
        session.image_path = path
        session.padded_width = padded_width
        session.padded_height = padded_height

        lower, upper = session.resolution_bounds()
        resolution = min(max(closest_power_of_two(max(1, session.resolution)), lower), upper)
        if resolution != session.resolution:
            session.resolution = resolution
            print(f"Resolution set to {resolution}.")

    def change_output(self, argument: str):
        """Switch between console and HTML output."""
        try:
            mode = OutputMode(argument)
        except ValueError:
            raise CommandError(OUTPUT_COMMAND_ERR_MSG) from None
        self.session.output_mode = mode
        self.output = self._make_output(mode)

    def run_ascii_art(self):
        """Convert the current image and send it to the active output."""
        if len(self.session.palette) == 0:
            raise EmptyPaletteError(EMPTY_SET_ERR_MSG)
        result = convert_session(self.session)
        written = self.output.out(result)
        if written is not None:
            print(f"✓ Saved ASCII art to {written}")

    def save_settings(self):
        """Persist the current image, resolution and output mode as startup defaults.

        The character palette is not saved.
        """
        session = self.session
        if session.image_path is not None:
            self.config.image_path = session.image_path
        self.config.resolution = session.resolution
        self.config.output_mode = session.output_mode

        success, error = self.config_manager.save(self.config)
        if not success:
            raise OutputError(f"{SAVE_CONFIG_ERR_MSG}: {error}")
        print(f"✓ Saved settings to {self.config_manager.config_path}")

    def _make_output(self, mode: OutputMode):
        if mode == OutputMode.HTML:
            return HtmlAsciiOutput(self.config.html_output_path, self.config.html_font)
        return ConsoleAsciiOutput()
