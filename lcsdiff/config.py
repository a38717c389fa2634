
import logging
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, HasTraits, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import init_logging, set_lcsdiff_log_level, warning


class LcsdiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def _configurable(entrypoint):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))
    return entrypoint_configurables[entrypoint]


def build_config(entrypoint, include_none=False):
    configurable = _configurable(entrypoint)

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('lcsdiff_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    for c in reversed(configurable.mro()):
        if issubclass(c, LcsdiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def load_configured(entrypoint):
    """Create the configurable of an entrypoint with the disk config applied.

    Values are validated by their traits, so an invalid value raises TraitError.
    """
    config = build_config(entrypoint)
    configurable = _configurable(entrypoint)
    names = configurable.class_trait_names(config=True)
    return configurable(**{k: v for k, v in config.items() if k in names})


_configured = {}
def get_configured(entrypoint):
    """Cached variant of load_configured.

    Unreadable or invalid config files are logged and the defaults used instead.
    """
    if entrypoint not in _configured:
        configurable = _configurable(entrypoint)
        try:
            instance = load_configured(entrypoint)
        except (OSError, ValueError, TraitError) as e:
            warning("Ignoring invalid lcsdiff config, using defaults: %s", e)
            instance = configurable()
        _configured[entrypoint] = instance
    return _configured[entrypoint]


def reset_config():
    "Forget cached configs, e.g. after config files changed."
    _configured.clear()


def init_logging_from_config(entrypoint):
    """Set up lcsdiff logging at the configured level."""
    level = getattr(logging, get_configured(entrypoint).log_level)
    init_logging(level=level)
    set_lcsdiff_log_level(level)
    return level


class Global(LcsdiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(Global):

    table_warning_cells = Integer(
        10000000,
        help="Log a warning when an LCS table with more cells than this "
             "is built. Set to 0 to disable.",
    ).tag(config=True)


entrypoint_configurables = {
    'global': Global,
    'diff': Diff,
}
