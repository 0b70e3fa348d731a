"""
Module containing the :class:`FormattingSettings` class, which controls how ranges, range sets and range maps are
rendered to and parsed from text. A module-level instance, :code:`formatting_settings`, is loaded from a JSON
configuration file within the settings directory of the rangekit package.
"""

#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #
#  This file is part of rangekit (interval algebra over ordered domains in Python)               #
#  Copyright © 2020 The rangekit authors.                                                        #
#                                                                                                #
#  This program is free software: you can redistribute it and/or modify it under the terms of    #
#  the GNU General Public License as published by the Free Software Foundation, either version   #
#  3 of the License, or (at your option) any later version.                                      #
#                                                                                                #
#  This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;     #
#  without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.     #
#  See the GNU General Public License for more details.                                          #
#                                                                                                #
#  You should have received a copy of the GNU General Public License along with this program.    #
#  If not, see <http://www.gnu.org/licenses/>.                                                   #
#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #

from types import SimpleNamespace
from .utilities import resolve_package_path, format_value, SavesToJSON
import logging
import json


class _RangekitSettings(SimpleNamespace, SavesToJSON):

    """Base class for rangekit settings classes."""

    factory_defaults = {}
    _settings_name = "Settings"
    _json_path = None
    _is_root_setting = False

    def __init__(self, settings_dict: dict = None):
        if settings_dict is None:
            settings_arguments = dict(self.factory_defaults)
        else:
            settings_arguments = {}
            for key in set(settings_dict.keys()).union(set(self.factory_defaults.keys())):
                if key in settings_dict and key in self.factory_defaults:
                    settings_arguments[key] = settings_dict[key]
                elif key in settings_dict:
                    # no factory default for this key; someone added something to the json file by hand
                    logging.warning("Unexpected key \"{}\" in {}".format(
                        key, self._json_path if self._json_path is not None else "settings"
                    ))
                    continue
                else:
                    settings_arguments[key] = self.factory_defaults[key]
                settings_arguments[key] = self._validate_attribute(key, settings_arguments[key])
        super().__init__(**settings_arguments)

    def restore_factory_defaults(self, persist=False) -> None:
        """
        Restores settings back to their "factory defaults" (the defaults when rangekit was installed).
        Unless the `persist` argument is set, this is temporary to the running of the current script.

        :param persist: if True, rewrites the JSON file from which defaults are loaded, meaning that this reset will
            persist to the running of scripts in the future.
        """
        for key in self.factory_defaults:
            vars(self)[key] = self.factory_defaults[key]
        if persist:
            self.make_persistent()

    def make_persistent(self) -> None:
        """
        Rewrites the JSON file from which settings are loaded, so that the current values are used by default in
        the future.
        """
        self.save_to_json(resolve_package_path(self._json_path))

    @classmethod
    def factory_default(cls):
        """
        Returns a factory default version of this settings object.
        """
        return cls({})

    def _to_dict(self):
        return {k: v for k, v in vars(self).items()}

    @classmethod
    def _from_dict(cls, json_object):
        return cls(json_object)

    @classmethod
    def load(cls):
        """
        Loads an instance of this settings object from its corresponding JSON file. If no such file exists, this
        creates a fresh one from the factory defaults; if it is corrupted, the factory defaults are used.
        """
        assert cls._is_root_setting, "Cannot load a non-root setting automatically."
        try:
            return cls.load_from_json(resolve_package_path(cls._json_path))
        except FileNotFoundError:
            logging.warning("{} not found; generating defaults.".format(cls._settings_name))
            factory_defaults = cls.factory_default()
            try:
                factory_defaults.make_persistent()
            except OSError:
                logging.warning("Could not write {}; using defaults for this session.".format(
                    cls._settings_name.lower()))
            return factory_defaults
        except (TypeError, ValueError, json.decoder.JSONDecodeError):
            logging.warning("Error loading {}; falling back to defaults.".format(cls._settings_name.lower()))
            return cls.factory_default()

    @staticmethod
    def _validate_attribute(key, value):
        return value

    def __setattr__(self, key, value):
        super().__setattr__(key, self._validate_attribute(key, value))


class FormattingSettings(_RangekitSettings):

    """
    Namespace containing the settings that govern the textual form of ranges.

    :param settings_dict: dictionary from which to set all settings attributes
    :ivar integral_floats_as_ints: if True, a float boundary with no fractional part is rendered without a decimal
        point, so that a range of 2.0 to 4.0 renders as "[2,4]"
    :ivar float_precision: if not None, the number of significant digits used when rendering float boundaries
    :ivar quote_strings: if True, string boundaries are rendered in single quotes, which lets values that contain
        separator characters survive a round trip through the parser
    :ivar parse_numbers_as: how numeric tokens are interpreted when no value type is given to the parser. "float"
        reads every number as a float; "auto" reads integer literals as ints and the rest as floats.
    """

    factory_defaults = {
        "integral_floats_as_ints": True,
        "float_precision": None,
        "quote_strings": False,
        "parse_numbers_as": "float",
    }

    _settings_name = "Formatting settings"
    _json_path = "settings/formattingSettings.json"
    _is_root_setting = True

    def __init__(self, settings_dict: dict = None):
        # set these to help with auto-completion
        self.integral_floats_as_ints = self.float_precision = self.quote_strings = self.parse_numbers_as = None
        super().__init__(settings_dict)

    @staticmethod
    def _validate_attribute(key, value):
        if value is None:
            return value
        if key == "float_precision":
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                logging.warning("Invalid value \"{}\" for float_precision; defaulting to None.".format(value))
                return None
        elif key == "parse_numbers_as":
            if value not in ("float", "auto"):
                logging.warning("Invalid value \"{}\" for parse_numbers_as; defaulting to \"float\".".format(value))
                return "float"
        elif key in ("integral_floats_as_ints", "quote_strings"):
            return bool(value)
        return value

    def format_value(self, value) -> str:
        """
        Formats a boundary value according to these settings.
        """
        return format_value(value, self.integral_floats_as_ints, self.float_precision, self.quote_strings)


formatting_settings = FormattingSettings.load()
