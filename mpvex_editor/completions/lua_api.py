"""MPV Lua scripting API catalog used for script completion.

Covers ``mp.*``, ``mp.msg.*``, ``mp.utils.*``, ``mp.options.*`` and the common
``require`` lines, plus the names of properties scripts usually observe.
See https://mpv.io/manual/master/#lua-scripting
"""

from .catalog import Catalog
from .models import ApiEntry
from ..utils.lazy import Lazy

CORE_FUNCTIONS = (
    # Commands / Properties
    ApiEntry("mp.command", "mp.command(string)", "Run an mpv command string"),
    ApiEntry("mp.commandv", "mp.commandv(arg1, arg2, ...)", "Run an mpv command with variadic args"),
    ApiEntry("mp.command_native", "mp.command_native(table)", "Run an mpv command via native table"),
    ApiEntry("mp.command_native_async", "mp.command_native_async(table, cb)", "Async mpv native command"),
    ApiEntry("mp.abort_async_command", "mp.abort_async_command(id)", "Abort an async command"),
    ApiEntry("mp.get_property", "mp.get_property(name [, def])", "Get property as string"),
    ApiEntry("mp.get_property_osd", "mp.get_property_osd(name [, def])", "Get property formatted for OSD"),
    ApiEntry("mp.get_property_bool", "mp.get_property_bool(name [, def])", "Get property as boolean"),
    ApiEntry("mp.get_property_number", "mp.get_property_number(name [, def])", "Get property as number"),
    ApiEntry("mp.get_property_native", "mp.get_property_native(name [, def])", "Get property as native Lua type"),
    ApiEntry("mp.set_property", "mp.set_property(name, value)", "Set property from string"),
    ApiEntry("mp.set_property_bool", "mp.set_property_bool(name, value)", "Set property from boolean"),
    ApiEntry("mp.set_property_number", "mp.set_property_number(name, value)", "Set property from number"),
    ApiEntry("mp.set_property_native", "mp.set_property_native(name, value)", "Set property from native value"),
    # Observe / Events
    ApiEntry("mp.observe_property", "mp.observe_property(name, type, fn)", "Observe a property for changes"),
    ApiEntry("mp.unobserve_property", "mp.unobserve_property(fn)", "Stop observing a property"),
    ApiEntry("mp.register_event", "mp.register_event(name, fn)", "Register an event handler"),
    ApiEntry("mp.unregister_event", "mp.unregister_event(fn)", "Unregister an event handler"),
    ApiEntry("mp.register_idle", "mp.register_idle(fn)", "Register an idle callback"),
    ApiEntry("mp.unregister_idle", "mp.unregister_idle(fn)", "Unregister an idle callback"),
    # Key Bindings
    ApiEntry("mp.add_key_binding", "mp.add_key_binding(key, name, fn [, flags])", "Add a key binding"),
    ApiEntry("mp.add_forced_key_binding", "mp.add_forced_key_binding(key, name, fn [, flags])", "Add forced key binding (overrides user)"),
    ApiEntry("mp.remove_key_binding", "mp.remove_key_binding(name)", "Remove a key binding"),
    # OSD / Timers
    ApiEntry("mp.osd_message", "mp.osd_message(text [, duration])", "Show OSD message"),
    ApiEntry("mp.add_timeout", "mp.add_timeout(seconds, fn)", "One-shot timer"),
    ApiEntry("mp.add_periodic_timer", "mp.add_periodic_timer(seconds, fn)", "Repeating timer"),
    # Script lifecycle
    ApiEntry("mp.get_script_name", "mp.get_script_name()", "Get name of running script"),
    ApiEntry("mp.get_script_directory", "mp.get_script_directory()", "Get directory of running script"),
    ApiEntry("mp.get_time", "mp.get_time()", "Get monotonic time in seconds"),
    ApiEntry("mp.enable_messages", "mp.enable_messages(level)", "Enable log message events at level"),
    ApiEntry("mp.register_script_message", "mp.register_script_message(name, fn)", "Register handler for script messages"),
    ApiEntry("mp.unregister_script_message", "mp.unregister_script_message(name)", "Unregister script message handler"),
    # Input
    ApiEntry("mp.input_enable_section", "mp.input_enable_section(name [, flags])", "Enable input section"),
    ApiEntry("mp.input_disable_section", "mp.input_disable_section(name)", "Disable input section"),
    ApiEntry("mp.input_define_section", "mp.input_define_section(name, contents [, flags])", "Define/update input section"),
    # Misc
    ApiEntry("mp.create_osd_overlay", "mp.create_osd_overlay(format)", "Create ASS or text OSD overlay"),
    ApiEntry("mp.get_osd_size", "mp.get_osd_size()", "Get OSD dimensions {w, h, aspect}"),
)

LOG_FUNCTIONS = (
    ApiEntry("mp.msg.fatal", "mp.msg.fatal(...)", "Log fatal message"),
    ApiEntry("mp.msg.error", "mp.msg.error(...)", "Log error message"),
    ApiEntry("mp.msg.warn", "mp.msg.warn(...)", "Log warning message"),
    ApiEntry("mp.msg.info", "mp.msg.info(...)", "Log info message"),
    ApiEntry("mp.msg.verbose", "mp.msg.verbose(...)", "Log verbose message"),
    ApiEntry("mp.msg.debug", "mp.msg.debug(...)", "Log debug message"),
    ApiEntry("mp.msg.trace", "mp.msg.trace(...)", "Log trace message"),
)

UTILITY_FUNCTIONS = (
    ApiEntry("mp.utils.getcwd", "mp.utils.getcwd()", "Get current working directory"),
    ApiEntry("mp.utils.readdir", "mp.utils.readdir(path [, filter])", "List directory contents"),
    ApiEntry("mp.utils.file_info", "mp.utils.file_info(path)", "Get file info (size, type, dates)"),
    ApiEntry("mp.utils.split_path", "mp.utils.split_path(path)", "Split into directory and filename"),
    ApiEntry("mp.utils.join_path", "mp.utils.join_path(p1, p2)", "Join two path components"),
    ApiEntry("mp.utils.subprocess", "mp.utils.subprocess(t)", "Run subprocess synchronously"),
    ApiEntry("mp.utils.subprocess_detached", "mp.utils.subprocess_detached(t)", "Run subprocess detached"),
    ApiEntry("mp.utils.getpid", "mp.utils.getpid()", "Get process ID"),
    ApiEntry("mp.utils.parse_json", "mp.utils.parse_json(str)", "Parse JSON string to Lua table"),
    ApiEntry("mp.utils.format_json", "mp.utils.format_json(v)", "Encode Lua value as JSON string"),
    ApiEntry("mp.utils.to_string", "mp.utils.to_string(v)", "Convert value to readable string"),
    ApiEntry("mp.utils.get_user_path", "mp.utils.get_user_path(path)", "Expand ~/ paths"),
)

OPTION_FUNCTIONS = (
    ApiEntry("mp.options.read_options", "mp.options.read_options(table [, id [, on_update]])", "Read script options from config"),
)

# Module imports commonly written at the top of a script
SNIPPETS = (
    ApiEntry("require 'mp'", "require 'mp'", "Import MPV core module"),
    ApiEntry("require 'mp.msg'", "require 'mp.msg'", "Import MPV logging module"),
    ApiEntry("require 'mp.utils'", "require 'mp.utils'", "Import MPV utilities module"),
    ApiEntry("require 'mp.options'", "require 'mp.options'", "Import MPV options module"),
    ApiEntry("require 'mp.assdraw'", "require 'mp.assdraw'", "Import ASS drawing helpers"),
)

# Properties worth passing to mp.observe_property()
OBSERVABLE_PROPERTIES = (
    "path", "filename", "file-size", "stream-open-filename",
    "media-title", "duration", "time-pos", "time-remaining",
    "percent-pos", "playback-time", "chapter", "chapter-list",
    "playlist", "playlist-pos", "playlist-count",
    "pause", "idle-active", "core-idle", "seeking",
    "speed", "volume", "mute", "audio-delay",
    "sub-delay", "sub-visibility", "secondary-sub-visibility",
    "fullscreen", "window-minimized", "window-maximized",
    "ontop", "video-params", "video-out-params",
    "width", "height", "dwidth", "dheight",
    "osd-width", "osd-height", "track-list",
    "current-tracks", "hwdec-current", "estimated-vf-fps",
    "display-fps", "vsync-jitter", "video-bitrate",
    "audio-bitrate", "cache-speed", "demuxer-cache-duration",
    "demuxer-cache-state", "eof-reached",
)

API_CATEGORIES = (
    ("core", CORE_FUNCTIONS),
    ("log", LOG_FUNCTIONS),
    ("utility", UTILITY_FUNCTIONS),
    ("option", OPTION_FUNCTIONS),
    ("snippet", SNIPPETS),
)


def build_api_catalog() -> Catalog[ApiEntry]:
    """Build the Lua API catalog from the category tables."""
    return Catalog(API_CATEGORIES)


API_CATALOG = Lazy(build_api_catalog)
