"""Custom value classes for django-configurations."""

import os

from configurations import values


class ApiKeyValue(values.Value):
    """
    Class used to read a provider API key from the environment.

    The value set is either (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set.
    * The value of the environment variable `{name}` if set.
    * The default value

    Surrounding whitespace is dropped and a blank key is read as None, so an
    empty variable leaves the provider unconfigured instead of sending an
    empty bearer token.
    """

    file_suffix = "FILE"

    def __init__(self, *args, **kwargs):
        """Initialize the value."""
        file_suffix = kwargs.pop("file_suffix", None)
        super().__init__(*args, **kwargs)
        if file_suffix:
            self.file_suffix = file_suffix

    def to_python(self, value):
        """Normalize the raw key."""
        value = (value or "").strip()
        return value or None

    def setup(self, name):
        """Get the value from environment variables."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            full_environ_name_file = f"{full_environ_name}_{self.file_suffix}"
            if full_environ_name_file in os.environ:
                filename = os.environ[full_environ_name_file]
                try:
                    with open(filename) as file:
                        value = self.to_python(file.read())
                except OSError as err:
                    raise ValueError(f"API key file {filename!r} cannot be read: {err!r}") from err
            elif full_environ_name in os.environ:
                value = self.to_python(os.environ[full_environ_name])
            elif self.environ_required:
                raise ValueError(
                    f"Value {name!r} is required to be set as the "
                    f"environment variable {full_environ_name_file!r} or {full_environ_name!r}"
                )
        self.value = value
        return value
