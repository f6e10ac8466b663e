"""Static tool registry.

Tool metadata is seed data: the sidebar, the dashboard grid and the `tools`
table are all built from ``TOOLS``. Ids double as URL slugs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

ALL_CATEGORY = 'all'


@dataclass(frozen=True)
class ToolCategory:
    id: str
    name: str
    icon: str


@dataclass(frozen=True)
class ToolDefinition:
    id: str
    name: str
    category: str
    icon: str
    description: str

    @property
    def route(self) -> str:
        return f'/tools/{self.id}'

    def to_dict(self) -> Dict[str, str]:
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'icon': self.icon,
            'description': self.description,
            'route': self.route,
        }


CATEGORIES: tuple[ToolCategory, ...] = (
    ToolCategory(ALL_CATEGORY, 'All Tools', 'fas fa-th-large'),
    ToolCategory('office', 'Office Suite', 'fas fa-briefcase'),
    ToolCategory('media', 'Media Tools', 'fas fa-photo-video'),
    ToolCategory('developer', 'Developer Tools', 'fas fa-code'),
    ToolCategory('security', 'Security', 'fas fa-shield-alt'),
    ToolCategory('content', 'Content Creation', 'fas fa-pen-fancy'),
    ToolCategory('text', 'Text Tools', 'fas fa-font'),
    ToolCategory('converters', 'Converters', 'fas fa-exchange-alt'),
    ToolCategory('generators', 'Generators', 'fas fa-magic'),
    ToolCategory('calculators', 'Calculators', 'fas fa-calculator'),
    ToolCategory('financial', 'Financial', 'fas fa-coins'),
    ToolCategory('productivity', 'Productivity', 'fas fa-tasks'),
    ToolCategory('networking', 'Networking', 'fas fa-network-wired'),
    ToolCategory('utilities', 'Utilities', 'fas fa-toolbox'),
    ToolCategory('ai', 'AI & Automation', 'fas fa-robot'),
)


def _tool(tool_id: str, name: str, category: str, icon: str, description: str) -> ToolDefinition:
    return ToolDefinition(id=tool_id, name=name, category=category, icon=icon, description=description)


TOOLS: tuple[ToolDefinition, ...] = (
    # Office suite
    _tool('word-processor', 'Word Processor', 'office', 'fas fa-file-word', 'Write and format documents.'),
    _tool('spreadsheet', 'Spreadsheet', 'office', 'fas fa-file-excel', 'Edit tables with formulas.'),
    _tool('presentation', 'Presentation', 'office', 'fas fa-file-powerpoint', 'Build slide decks.'),
    _tool('email-client', 'Email Client', 'office', 'fas fa-envelope', 'Compose and organize email drafts.'),
    _tool('database-manager', 'Database Manager', 'office', 'fas fa-database', 'Browse and edit simple tables.'),
    _tool('note-taking', 'Note Taking', 'office', 'fas fa-sticky-note', 'Capture notes in notebooks.'),
    _tool('file-share', 'File Share', 'office', 'fas fa-share-alt', 'Share files with expiring download links.'),
    _tool('text-share', 'Text Share', 'office', 'fas fa-paste', 'Share text snippets with expiring links.'),
    # Media
    _tool('image-resizer', 'Image Resizer', 'media', 'fas fa-expand-arrows-alt', 'Resize images to exact dimensions.'),
    _tool('photo-cropper', 'Photo Cropper', 'media', 'fas fa-crop', 'Crop photos to a preset or free aspect ratio.'),
    _tool('pdf-merger', 'PDF Merger', 'media', 'fas fa-file-pdf', 'Combine several PDFs into one.'),
    _tool('video-to-gif', 'Video to GIF', 'media', 'fas fa-film', 'Turn short clips into animated GIFs.'),
    _tool('image-optimizer', 'Image Optimizer', 'media', 'fas fa-compress', 'Reduce image file size.'),
    _tool('audio-converter', 'Audio Converter', 'media', 'fas fa-music', 'Convert audio between formats.'),
    _tool('ocr-text-extractor', 'OCR Text Extractor', 'media', 'fas fa-eye', 'Extract text from images.'),
    _tool('video-editor', 'Video Editor', 'media', 'fas fa-video', 'Trim and join video clips.'),
    _tool('audio-editor', 'Audio Editor', 'media', 'fas fa-wave-square', 'Cut and adjust audio tracks.'),
    _tool('image-editor', 'Image Editor', 'media', 'fas fa-paint-brush', 'Adjust and annotate images.'),
    _tool('gif-maker', 'GIF Maker', 'media', 'fas fa-images', 'Assemble images into a GIF.'),
    _tool('watermark-tool', 'Watermark Tool', 'media', 'fas fa-tint', 'Stamp a watermark on images.'),
    # Developer
    _tool('json-formatter', 'JSON Formatter', 'developer', 'fas fa-code', 'Pretty-print and validate JSON.'),
    _tool('regex-tester', 'Regex Tester', 'developer', 'fas fa-search', 'Test regular expressions live.'),
    _tool('api-tester', 'API Tester', 'developer', 'fas fa-plug', 'Send HTTP requests and inspect responses.'),
    _tool('css-minifier', 'CSS Minifier', 'developer', 'fab fa-css3-alt', 'Minify stylesheets.'),
    _tool('html-validator', 'HTML Validator', 'developer', 'fab fa-html5', 'Check markup for common errors.'),
    _tool('sql-formatter', 'SQL Formatter', 'developer', 'fas fa-table', 'Format SQL queries.'),
    _tool('xml-formatter', 'XML Formatter', 'developer', 'fas fa-file-code', 'Pretty-print XML documents.'),
    _tool('markdown-editor', 'Markdown Editor', 'developer', 'fab fa-markdown', 'Write Markdown with live preview.'),
    # Security
    _tool('password-generator', 'Password Generator', 'security', 'fas fa-key', 'Generate strong random passwords.'),
    _tool('hash-generator', 'Hash Generator', 'security', 'fas fa-hashtag', 'Compute MD5/SHA digests.'),
    _tool('ssl-checker', 'SSL Checker', 'security', 'fas fa-lock', 'Inspect a site certificate.'),
    _tool('text-encryptor', 'Text Encryptor', 'security', 'fas fa-user-secret', 'Encrypt and decrypt short texts.'),
    # Content creation
    _tool('social-media-generator', 'Social Media Generator', 'content', 'fas fa-hashtag', 'Draft posts for social networks.'),
    _tool('meme-generator', 'Meme Generator', 'content', 'fas fa-laugh', 'Caption images as memes.'),
    _tool('quote-generator', 'Quote Generator', 'content', 'fas fa-quote-right', 'Get a random quote.'),
    _tool('invoice-generator', 'Invoice Generator', 'content', 'fas fa-file-invoice', 'Create printable invoices.'),
    _tool('resume-builder', 'Resume Builder', 'content', 'fas fa-id-card', 'Build a resume from a template.'),
    # Text
    _tool('word-counter', 'Word Counter', 'text', 'fas fa-align-left', 'Count words, characters and sentences.'),
    _tool('text-to-speech', 'Text to Speech', 'text', 'fas fa-volume-up', 'Read text aloud with adjustable voice settings.'),
    _tool('language-translator', 'Language Translator', 'text', 'fas fa-language', 'Translate text between languages.'),
    # Converters
    _tool('unit-converter', 'Unit Converter', 'converters', 'fas fa-ruler', 'Convert length, weight and more.'),
    _tool('base64-converter', 'Base64 Converter', 'converters', 'fas fa-exchange-alt', 'Encode and decode Base64.'),
    _tool('csv-to-json', 'CSV to JSON', 'converters', 'fas fa-file-csv', 'Convert CSV rows to JSON.'),
    _tool('color-converter', 'Color Converter', 'converters', 'fas fa-palette', 'Convert HEX, RGB and HSL.'),
    _tool('timezone-converter', 'Timezone Converter', 'converters', 'fas fa-globe', 'Convert times between zones.'),
    _tool('pdf-converter', 'PDF Converter', 'converters', 'fas fa-file-export', 'Convert documents to PDF.'),
    # Generators
    _tool('qr-generator', 'QR Generator', 'generators', 'fas fa-qrcode', 'Create QR codes.'),
    _tool('lorem-ipsum-generator', 'Lorem Ipsum Generator', 'generators', 'fas fa-paragraph', 'Generate placeholder text.'),
    _tool('barcode-generator', 'Barcode Generator', 'generators', 'fas fa-barcode', 'Create printable barcodes.'),
    _tool('color-palette-generator', 'Color Palette Generator', 'generators', 'fas fa-swatchbook', 'Generate harmonious palettes.'),
    _tool('gradient-generator', 'Gradient Generator', 'generators', 'fas fa-fill-drip', 'Build CSS gradients.'),
    _tool('meta-tag-generator', 'Meta Tag Generator', 'generators', 'fas fa-tags', 'Generate SEO meta tags.'),
    _tool('favicon-generator', 'Favicon Generator', 'generators', 'fas fa-star', 'Make favicons from images.'),
    # Calculators
    _tool('bmi-calculator', 'BMI Calculator', 'calculators', 'fas fa-weight', 'Calculate Body Mass Index in metric or imperial units.'),
    _tool('loan-calculator', 'Loan Calculator', 'calculators', 'fas fa-hand-holding-usd', 'Estimate loan repayments.'),
    _tool('age-calculator', 'Age Calculator', 'calculators', 'fas fa-birthday-cake', 'Compute exact age from a birth date.'),
    _tool('date-calculator', 'Date Calculator', 'calculators', 'fas fa-calendar-alt', 'Add to dates or measure intervals.'),
    _tool('percentage-calculator', 'Percentage Calculator', 'calculators', 'fas fa-percent', 'Solve percentage problems.'),
    _tool('tip-calculator', 'Tip Calculator', 'calculators', 'fas fa-receipt', 'Split bills and tips.'),
    # Financial
    _tool('expense-tracker', 'Expense Tracker', 'financial', 'fas fa-wallet', 'Track spending by category.'),
    _tool('budget-calculator', 'Budget Calculator', 'financial', 'fas fa-piggy-bank', 'Plan a monthly budget.'),
    _tool('investment-calculator', 'Investment Calculator', 'financial', 'fas fa-chart-line', 'Project compound growth.'),
    _tool('tax-calculator', 'Tax Calculator', 'financial', 'fas fa-file-invoice-dollar', 'Estimate income tax.'),
    _tool('currency-converter', 'Currency Converter', 'financial', 'fas fa-dollar-sign', 'Convert between currencies.'),
    # Productivity
    _tool('pomodoro-timer', 'Pomodoro Timer', 'productivity', 'fas fa-clock', 'Focus in timed intervals.'),
    _tool('notes-app', 'Notes App', 'productivity', 'fas fa-clipboard', 'Keep quick notes.'),
    _tool('todo-list', 'Todo List', 'productivity', 'fas fa-check-square', 'Manage a task list.'),
    _tool('habit-tracker', 'Habit Tracker', 'productivity', 'fas fa-calendar-check', 'Track daily habits.'),
    # Networking
    _tool('ip-lookup', 'IP Lookup', 'networking', 'fas fa-map-marker-alt', 'Locate an IP address.'),
    _tool('domain-whois', 'Domain WHOIS', 'networking', 'fas fa-address-card', 'Look up domain registration.'),
    _tool('port-scanner', 'Port Scanner', 'networking', 'fas fa-door-open', 'Check which ports respond.'),
    _tool('ping-test', 'Ping Test', 'networking', 'fas fa-signal', 'Measure round-trip latency.'),
    _tool('speed-test', 'Speed Test', 'networking', 'fas fa-tachometer-alt', 'Measure connection speed.'),
    # Utilities
    _tool('email-validator', 'Email Validator', 'utilities', 'fas fa-at', 'Validate email address syntax.'),
    _tool('url-shortener', 'URL Shortener', 'utilities', 'fas fa-link', 'Shorten long links.'),
    _tool('website-screenshot', 'Website Screenshot', 'utilities', 'fas fa-camera', 'Capture a page screenshot.'),
    _tool('file-compressor', 'File Compressor', 'utilities', 'fas fa-file-archive', 'Compress multiple files into a single ZIP archive.'),
    _tool('duplicate-finder', 'Duplicate Finder', 'utilities', 'fas fa-clone', 'Find duplicate files.'),
    _tool('weather-dashboard', 'Weather Dashboard', 'utilities', 'fas fa-cloud-sun', 'Check the forecast.'),
    # AI & automation
    _tool('chatbot', 'Chatbot', 'ai', 'fas fa-comments', 'Chat with an assistant.'),
    _tool('content-summarizer', 'Content Summarizer', 'ai', 'fas fa-compress-alt', 'Summarize long texts.'),
    _tool('keyword-extractor', 'Keyword Extractor', 'ai', 'fas fa-key', 'Pull keywords from text.'),
    _tool('sentiment-analyzer', 'Sentiment Analyzer', 'ai', 'fas fa-smile', 'Score text sentiment.'),
)

_TOOLS_BY_ID: Dict[str, ToolDefinition] = {tool.id: tool for tool in TOOLS}
_CATEGORIES_BY_ID: Dict[str, ToolCategory] = {category.id: category for category in CATEGORIES}

if len(_TOOLS_BY_ID) != len(TOOLS):
    raise RuntimeError('Tool registry contains duplicate ids')


def get_tool(tool_id: str) -> Optional[ToolDefinition]:
    if not tool_id:
        return None
    return _TOOLS_BY_ID.get(tool_id)


def get_category(category_id: str) -> Optional[ToolCategory]:
    if not category_id:
        return None
    return _CATEGORIES_BY_ID.get(category_id)


def get_tools_by_category(category_id: str) -> List[ToolDefinition]:
    """Tools visible under ``category_id``; ``'all'`` shows everything."""
    if category_id == ALL_CATEGORY:
        return list(TOOLS)
    return [tool for tool in TOOLS if tool.category == category_id]


def search_tools(query: str) -> List[ToolDefinition]:
    """Case-insensitive substring search over name, description and category."""
    needle = (query or '').strip().lower()
    if not needle:
        return []
    return [
        tool
        for tool in TOOLS
        if needle in tool.name.lower()
        or needle in tool.description.lower()
        or needle in tool.category.lower()
    ]
