"""MPV configuration option catalog used for mpv.conf / input.conf completion.

All major mpv options, grouped by category. See https://mpv.io/manual/master/
for the authoritative reference.
"""

from .catalog import Catalog
from .models import ConfigOption
from ..utils.lazy import Lazy

# General
GENERAL_OPTIONS = (
    ConfigOption("profile", "Use a configuration profile", ""),
    ConfigOption("profile-desc", "Description for a profile", ""),
    ConfigOption("profile-cond", "Conditional profile activation (Lua expression)", ""),
    ConfigOption("profile-restore", "Restore options on profile deactivation", "default"),
    ConfigOption("keep-open", "Keep player open after playback ends", "no"),
    ConfigOption("keep-open-pause", "Pause when keep-open is active", "yes"),
    ConfigOption("save-position-on-quit", "Save playback position on quit", "no"),
    ConfigOption("watch-later-options", "Options to save in watch-later data", ""),
    ConfigOption("fullscreen", "Start in fullscreen mode", "no"),
    ConfigOption("fs", "Start in fullscreen mode (alias)", "no"),
    ConfigOption("loop-file", "Loop the current file", "no"),
    ConfigOption("loop-playlist", "Loop the playlist", "no"),
    ConfigOption("loop", "Loop playback", "no"),
    ConfigOption("shuffle", "Shuffle playlist", "no"),
    ConfigOption("idle", "Stay open when no file is playing", "no"),
    ConfigOption("input-default-bindings", "Enable default key bindings", "yes"),
    ConfigOption("input-vo-keyboard", "Enable keyboard input on video window", "yes"),
    ConfigOption("log-file", "Path to log file", ""),
    ConfigOption("msg-level", "Set message level for modules", ""),
    ConfigOption("term-osd-bar", "Show OSD bar in terminal", "no"),
    ConfigOption("priority", "Process priority (Windows)", "normal"),
    ConfigOption("load-scripts", "Load scripts from scripts directory", "yes"),
    ConfigOption("ytdl", "Use yt-dlp for URL resolution", "yes"),
    ConfigOption("ytdl-format", "yt-dlp format selection", ""),
    ConfigOption("ytdl-raw-options", "Additional yt-dlp options", ""),
    ConfigOption("script-opts", "Script option key=value pairs", ""),
    ConfigOption("reset-on-next-file", "Reset options on next file", ""),
)

# Video
VIDEO_OPTIONS = (
    ConfigOption("vo", "Video output driver", "gpu"),
    ConfigOption("gpu-api", "GPU API backend", "auto"),
    ConfigOption("gpu-context", "GPU context backend", "auto"),
    ConfigOption("hwdec", "Hardware decoding mode", "no"),
    ConfigOption("hwdec-codecs", "Codecs to use hardware decoding for", "h264,vc1,hevc,vp8,vp9,av1"),
    ConfigOption("vf", "Video filter chain", ""),
    ConfigOption("video-sync", "Video sync mode", "audio"),
    ConfigOption("video-aspect-override", "Override video aspect ratio", ""),
    ConfigOption("video-rotate", "Rotate video (degrees)", "0"),
    ConfigOption("video-zoom", "Video zoom factor", "0"),
    ConfigOption("video-pan-x", "Video pan X offset", "0"),
    ConfigOption("video-pan-y", "Video pan Y offset", "0"),
    ConfigOption("video-align-x", "Video alignment X", "0"),
    ConfigOption("video-align-y", "Video alignment Y", "0"),
    ConfigOption("video-unscaled", "Display video at original resolution", "no"),
    ConfigOption("deinterlace", "Enable deinterlacing", "no"),
    ConfigOption("interpolation", "Enable frame interpolation", "no"),
    ConfigOption("tscale", "Temporal scaling filter", "oversample"),
    ConfigOption("scale", "Upscaling filter", "lanczos"),
    ConfigOption("dscale", "Downscaling filter", ""),
    ConfigOption("cscale", "Chroma scaling filter", ""),
    ConfigOption("scale-antiring", "Anti-ringing for upscaling", "0"),
    ConfigOption("correct-downscaling", "Enable correct downscaling", "no"),
    ConfigOption("sigmoid-upscaling", "Enable sigmoid upscaling", "no"),
    ConfigOption("linear-downscaling", "Enable linear downscaling", "yes"),
    ConfigOption("linear-upscaling", "Enable linear upscaling", "no"),
    ConfigOption("dither-depth", "Dither depth", "auto"),
    ConfigOption("vd-queue-enable", "Enable video decoder queue", "no"),
    ConfigOption("vd-lavc-threads", "Video decoder threads", "0"),
)

# Audio
AUDIO_OPTIONS = (
    ConfigOption("ao", "Audio output driver", "auto"),
    ConfigOption("audio-device", "Audio output device", "auto"),
    ConfigOption("volume", "Startup volume", "100"),
    ConfigOption("volume-max", "Maximum amplified volume", "130"),
    ConfigOption("mute", "Mute audio on startup", "no"),
    ConfigOption("audio-channels", "Audio channel layout", "auto-safe"),
    ConfigOption("audio-normalize-downmix", "Normalize when downmixing", "no"),
    ConfigOption("af", "Audio filter chain", ""),
    ConfigOption("audio-spdif", "Passthrough codecs via S/PDIF", ""),
    ConfigOption("audio-exclusive", "Exclusive audio output mode", "no"),
    ConfigOption("audio-file-auto", "Auto-load external audio files", "no"),
    ConfigOption("audio-pitch-correction", "Pitch correction on speed change", "yes"),
    ConfigOption("gapless-audio", "Gapless audio playback", "weak"),
    ConfigOption("audio-display", "Display cover art", "attachment"),
    ConfigOption("ad-queue-enable", "Enable audio decoder queue", "no"),
    ConfigOption("alang", "Preferred audio languages", ""),
)

# Subtitles
SUBTITLE_OPTIONS = (
    ConfigOption("sub-auto", "Auto-load subtitles", "exact"),
    ConfigOption("sub-file-paths", "Subtitle file search paths", ""),
    ConfigOption("sub-font", "Subtitle font name", ""),
    ConfigOption("sub-font-size", "Subtitle font size", "55"),
    ConfigOption("sub-color", "Subtitle font color", "#FFFFFFFF"),
    ConfigOption("sub-border-color", "Subtitle border color", "#FF000000"),
    ConfigOption("sub-border-size", "Subtitle border size", "3"),
    ConfigOption("sub-shadow-color", "Subtitle shadow color", "#80000000"),
    ConfigOption("sub-shadow-offset", "Subtitle shadow offset", "0"),
    ConfigOption("sub-back-color", "Subtitle background color", ""),
    ConfigOption("sub-bold", "Bold subtitles", "no"),
    ConfigOption("sub-italic", "Italic subtitles", "no"),
    ConfigOption("sub-blur", "Subtitle blur", "0"),
    ConfigOption("sub-margin-x", "Subtitle horizontal margin", "25"),
    ConfigOption("sub-margin-y", "Subtitle vertical margin", "22"),
    ConfigOption("sub-pos", "Subtitle vertical position (%)", "100"),
    ConfigOption("sub-spacing", "Subtitle letter spacing", "0"),
    ConfigOption("sub-ass-override", "Override ASS subtitle styles", "yes"),
    ConfigOption("sub-ass-force-margins", "Force subtitle margins", "no"),
    ConfigOption("sub-ass-force-style", "Force ASS style overrides", ""),
    ConfigOption("sub-fix-timing", "Fix subtitle timing", "yes"),
    ConfigOption("sub-delay", "Subtitle delay (seconds)", "0"),
    ConfigOption("sub-visibility", "Show subtitles", "yes"),
    ConfigOption("secondary-sub-visibility", "Show secondary subtitles", "no"),
    ConfigOption("slang", "Preferred subtitle languages", ""),
    ConfigOption("sub-scale", "Subtitle scale factor", "1"),
    ConfigOption("sub-ass-vsfilter-blur-compat", "VSFilter blur compatibility", "yes"),
    ConfigOption("sub-ass-scale-with-window", "Scale ASS subs with window", "yes"),
    ConfigOption("secondary-sid", "Secondary subtitle track ID", "no"),
    ConfigOption("sub-forced-events-only", "Only show forced subtitle events", "no"),
)

# OSD
OSD_OPTIONS = (
    ConfigOption("osd-level", "OSD display level (0-3)", "1"),
    ConfigOption("osd-font", "OSD font name", ""),
    ConfigOption("osd-font-size", "OSD font size", "55"),
    ConfigOption("osd-color", "OSD text color", "#FFFFFFFF"),
    ConfigOption("osd-border-color", "OSD border color", "#FF000000"),
    ConfigOption("osd-border-size", "OSD border width", "3"),
    ConfigOption("osd-shadow-color", "OSD shadow color", ""),
    ConfigOption("osd-shadow-offset", "OSD shadow offset", "0"),
    ConfigOption("osd-back-color", "OSD background color", ""),
    ConfigOption("osd-bold", "Bold OSD text", "yes"),
    ConfigOption("osd-italic", "Italic OSD text", "no"),
    ConfigOption("osd-bar", "Show OSD seek bar", "yes"),
    ConfigOption("osd-duration", "OSD message duration (ms)", "1000"),
    ConfigOption("osd-on-seek", "OSD display on seek", "bar"),
    ConfigOption("osd-bar-align-y", "OSD bar vertical alignment", "0.5"),
    ConfigOption("osd-bar-w", "OSD bar width (%)", "75"),
    ConfigOption("osd-bar-h", "OSD bar height (%)", "3.125"),
    ConfigOption("osd-border-style", "OSD border style", "background-box"),
    ConfigOption("osd-margin-x", "OSD horizontal margin", "25"),
    ConfigOption("osd-margin-y", "OSD vertical margin", "22"),
)

# Cache / demuxer
CACHE_OPTIONS = (
    ConfigOption("cache", "Enable cache", "auto"),
    ConfigOption("cache-secs", "Cache duration (seconds)", "10"),
    ConfigOption("cache-on-disk", "Store cache on disk", "no"),
    ConfigOption("cache-dir", "Cache directory path", ""),
    ConfigOption("cache-pause", "Pause when cache is empty", "yes"),
    ConfigOption("cache-pause-wait", "Wait time when cache is empty (s)", "1"),
    ConfigOption("cache-pause-initial", "Pause initially to fill cache", "no"),
    ConfigOption("demuxer-max-bytes", "Maximum demuxer cache bytes", "150MiB"),
    ConfigOption("demuxer-max-back-bytes", "Maximum demuxer back-cache bytes", "50MiB"),
    ConfigOption("demuxer-seekable-cache", "Enable seekable demuxer cache", "auto"),
    ConfigOption("demuxer-readahead-secs", "Demuxer readahead duration (s)", "1"),
    ConfigOption("demuxer-mkv-subtitle-preroll", "MKV subtitle preroll", "index"),
    ConfigOption("demuxer-thread", "Enable threaded demuxing", "yes"),
)

# HDR / tone mapping
HDR_OPTIONS = (
    ConfigOption("target-colorspace-hint", "Signal HDR to display", "no"),
    ConfigOption("target-trc", "Target transfer characteristics", "auto"),
    ConfigOption("target-prim", "Target color primaries", "auto"),
    ConfigOption("target-peak", "Target peak brightness (nits)", "auto"),
    ConfigOption("tone-mapping", "Tone mapping algorithm", "auto"),
    ConfigOption("tone-mapping-mode", "Tone mapping mode", "auto"),
    ConfigOption("inverse-tone-mapping", "Enable inverse tone mapping", "no"),
    ConfigOption("hdr-compute-peak", "Compute HDR peak per-frame", "auto"),
    ConfigOption("hdr-peak-percentile", "HDR peak percentile", "99.995"),
    ConfigOption("hdr-peak-decay-rate", "HDR peak decay rate", "20"),
    ConfigOption("hdr-scene-threshold-low", "HDR scene change threshold low", "1"),
    ConfigOption("hdr-scene-threshold-high", "HDR scene change threshold high", "3"),
    ConfigOption("gamut-mapping-mode", "Gamut mapping mode", "auto"),
)

# GPU backend (Vulkan)
GPU_BACKEND_OPTIONS = (
    ConfigOption("vulkan-async-compute", "Enable async compute", "no"),
    ConfigOption("vulkan-async-transfer", "Enable async transfer", "no"),
    ConfigOption("vulkan-queue-count", "Number of Vulkan queues", "1"),
    ConfigOption("vulkan-swap-mode", "Vulkan swap chain mode", "auto"),
    ConfigOption("vulkan-device", "Vulkan device to use", ""),
)

# Screenshots
SCREENSHOT_OPTIONS = (
    ConfigOption("screenshot-format", "Screenshot image format", "jpg"),
    ConfigOption("screenshot-directory", "Screenshot save directory", ""),
    ConfigOption("screenshot-template", "Screenshot filename template", "mpv-shot%n"),
    ConfigOption("screenshot-tag-colorspace", "Tag screenshot colorspace", "no"),
    ConfigOption("screenshot-jpeg-quality", "JPEG screenshot quality", "90"),
    ConfigOption("screenshot-png-compression", "PNG screenshot compression", "7"),
    ConfigOption("screenshot-webp-quality", "WebP screenshot quality", "75"),
    ConfigOption("screenshot-webp-lossless", "Lossless WebP screenshots", "no"),
    ConfigOption("screenshot-high-bit-depth", "High bit-depth screenshots", "yes"),
)

# Window / display
WINDOW_OPTIONS = (
    ConfigOption("geometry", "Window geometry / position", ""),
    ConfigOption("autofit", "Maximum window size", ""),
    ConfigOption("autofit-larger", "Maximum window size (limit large)", ""),
    ConfigOption("autofit-smaller", "Minimum window size (expand small)", ""),
    ConfigOption("window-scale", "Window scale factor", "1"),
    ConfigOption("window-minimized", "Start minimized", "no"),
    ConfigOption("window-maximized", "Start maximized", "no"),
    ConfigOption("force-window", "Create window even without video", "no"),
    ConfigOption("ontop", "Set window always on top", "no"),
    ConfigOption("border", "Show window border", "yes"),
    ConfigOption("title", "Window title", "${media-title}"),
    ConfigOption("cursor-autohide", "Auto-hide cursor (ms)", "1000"),
    ConfigOption("cursor-autohide-fs-only", "Auto-hide cursor in fullscreen only", "no"),
    ConfigOption("snap-window", "Snap window to edges", "no"),
    ConfigOption("hidpi-window-scale", "Scale window for HiDPI", "yes"),
    ConfigOption("native-keyrepeat", "Use native key repeat", "no"),
)

# Input / key bindings
INPUT_OPTIONS = (
    ConfigOption("input-conf", "Path to input.conf for key bindings", ""),
    ConfigOption("no-input-default-bindings", "Disable default key bindings", ""),
    ConfigOption("input-ar-delay", "Auto-repeat delay (ms)", "200"),
    ConfigOption("input-ar-rate", "Auto-repeat rate (per second)", "40"),
    ConfigOption("input-cursor", "Enable cursor input", "yes"),
    ConfigOption("input-right-alt-gr", "Right Alt is AltGr", "no"),
)

OPTION_CATEGORIES = (
    ("general", GENERAL_OPTIONS),
    ("video", VIDEO_OPTIONS),
    ("audio", AUDIO_OPTIONS),
    ("subtitle", SUBTITLE_OPTIONS),
    ("osd", OSD_OPTIONS),
    ("cache", CACHE_OPTIONS),
    ("hdr", HDR_OPTIONS),
    ("gpu-backend", GPU_BACKEND_OPTIONS),
    ("screenshot", SCREENSHOT_OPTIONS),
    ("window", WINDOW_OPTIONS),
    ("input", INPUT_OPTIONS),
)


def build_option_catalog() -> Catalog[ConfigOption]:
    """Build the option catalog from the category tables."""
    return Catalog(OPTION_CATEGORIES)


OPTION_CATALOG = Lazy(build_option_catalog)
