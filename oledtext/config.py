import logging
import os
import sys

from oledtext.exceptions import ConfigurationError


class Config:
    DEFAULTS = {
        "LOGGING_LEVEL_CONSOLE": logging.INFO,  # See documentation of Logging package
        "LOGGING_LEVEL_FILE": logging.ERROR,
        "LOGGING_FILE": (
            None,
            [type(None), str],
        ),  # or set to file path : '/var/log/oledtext.log'
        "LOGGING_FILE_MAX_SIZE": (10, int, (0, 0xFFFFFFFF)),  # Max log file size in MB
        "LOGGING_FILE_MAX_FILES": (
            2,
            int,
            (0, 0xFFFFFFFF),
        ),  # Max old log files to keep
        # Debug output
        "DEBUG_ENABLE": False,  # Emit dbgprint lines to the log
        "DEBUG_BUFFER_SIZE": (100, int, (1, 0xFFFF)),  # Max dbgprint line length, terminator included
        # Display geometry
        "DISPLAY_WIDTH": (128, int, (1, 0xFFFF)),  # Pixels
        "DISPLAY_HEIGHT": (64, int, (1, 0xFFFF)),  # Pixels
        "CHAR_WIDTH": (5, int, (1, 0xFF)),  # Text font cell width in pixels
        "CHAR_HEIGHT": (8, int, (1, 0xFF)),  # Text font cell height in pixels
    }

    CONFIG_LOADED = False
    CONFIG_FILE_LOCATION = None

    def __dir__(self):
        return list(self.DEFAULTS.keys()) + list(self.__class__.__dict__) + dir(super())

    def __init__(self):
        self._reset_defaults()

    def load(self, alt_location=None):
        self.CONFIG_LOADED = False

        self._find_config(alt_location)

        sys.stdout.write(
            "Attempting to load configuration from %s\n" % self.CONFIG_FILE_LOCATION
        )
        entries = self._read_config()
        self._update_from_environment(entries)
        self._set_values(entries)

        self.CONFIG_LOADED = True

    def load_environment(self):
        """Apply OLEDTEXT_* environment overrides on top of the current values."""
        entries = {}
        self._update_from_environment(entries)
        self._set_values(entries)

    def _set_values(self, entries):
        for k, v in entries.items():
            if k[0].isupper() and k in self.DEFAULTS:
                default = self.DEFAULTS.get(k)

                if isinstance(default, tuple) and 2 <= len(default) <= 3:
                    default_type = default[1]

                    if not isinstance(default_type, list):
                        default_type = [default_type]
                    else:
                        default_type = list(default_type)

                else:
                    default_type = [type(default)]

                if float in default_type and int not in default_type:
                    default_type.append(int)
                if type(v) not in default_type:
                    err = "Error parsing configuration: Invalid value type {} for config argument {}. Allowed are: {}".format(
                        type(v), k, default_type
                    )
                    sys.stderr.write(err + "\n")
                    raise ConfigurationError(err)

                if isinstance(default, tuple) and len(default) == 3:
                    expected_value = default[2]
                    valid = False

                    if isinstance(v, int):
                        if expected_value[0] <= v <= expected_value[1]:
                            valid = True
                    elif isinstance(v, str):
                        if v in expected_value:
                            valid = True
                    else:
                        valid = True

                    if not valid:
                        err = "Error parsing configuration value: Invalid value for config argument {} (type {}). Allowed are in: {}".format(
                            k, type(v), expected_value
                        )
                        sys.stderr.write(err + "\n")
                        raise ConfigurationError(err)

                setattr(self, k, v)

    def _update_from_environment(self, entries):
        # Updates values from env variables
        for args in os.environ:
            if not args.startswith("OLEDTEXT_") or len(args) < 10:
                continue
            opt = args[9:]
            if opt in self.DEFAULTS:
                v = os.environ[args]
                if isinstance(self.DEFAULTS[opt], bool):
                    v = v.lower() in ("1", "true", "yes", "on")
                elif v.isdigit():
                    v = int(v)

                entries[opt] = v

    def _read_config(self):
        entries = {}
        conf_extension = os.path.splitext(self.CONFIG_FILE_LOCATION)[1]
        if conf_extension in [".conf", ".py"]:
            with open(self.CONFIG_FILE_LOCATION) as f:
                exec(f.read(), None, entries)
        elif conf_extension in [".json"]:
            import json

            with open(self.CONFIG_FILE_LOCATION) as f:
                entries = json.load(f)
        elif conf_extension in [".yaml"]:
            import yaml

            with open(self.CONFIG_FILE_LOCATION) as f:
                entries = yaml.safe_load(f) or {}
        else:
            err = "ERROR: Unsupported configuration file type"
            sys.stderr.write(err + "\n")
            raise ConfigurationError(err)
        return entries

    def _find_config(self, alt_location):
        env_config_path = os.environ.get("OLEDTEXT_CONFIG_FILE")
        if alt_location is not None:
            locations = [alt_location]
        elif env_config_path:
            locations = [env_config_path]
        else:
            filenames = ["oledtext.conf", "oledtext.json", "oledtext.yaml"]
            locations = [
                os.path.join(dir, filename)
                for dir in [
                    os.path.realpath(os.getcwd()),
                    os.path.expanduser("~/.local/etc"),
                    "/etc/oledtext",
                    "/usr/local/etc/oledtext",
                ]
                for filename in filenames
            ]
        for location in locations:
            location = os.path.expanduser(location)
            if os.path.exists(location) and os.path.isfile(location):
                self.CONFIG_FILE_LOCATION = location
                break
        else:
            err = f"ERROR: Could not find configuration file. Tried: {locations}"
            sys.stderr.write(err + "\n")
            raise ConfigurationError(err)

    def _reset_defaults(self):
        # Reset defaults
        for k, v in self.DEFAULTS.items():
            if isinstance(v, tuple):
                v = v[0]

            setattr(self, k, v)


config = Config()
