from lixtools.functionCalls.getUserEnvironment import get_user_environment
from lixtools.functionCalls.getYoutubeDetails import get_youtube_video_script, format_video_script_message
from lixtools.functionCalls.visitLinks import (
    visit_links,
    visit_links_html,
    format_visit_links_message,
    format_visit_links_html_message,
)

get_user_environment_schema = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {},
    "required": []
}

get_youtube_video_script_schema = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "The URL of the YouTube video."
        }
    },
    "required": ["url"]
}

visit_links_schema = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {
        "links": {
            "type": "array",
            "items": {
                "type": "string",
                "format": "uri"
            },
            "description": "An array of web links (URLs) to visit.",
            "minItems": 1
        }
    },
    "required": ["links"]
}

visit_links_html_schema = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {
        "links": {
            "type": "array",
            "items": {
                "type": "string",
                "format": "uri"
            },
            "description": "An array of web links (URLs) to visit to get the HTML content.",
            "minItems": 1
        }
    },
    "required": ["links"]
}

tools = [
    {
        "name": "GetUserEnvironment",
        "display_name": "User Environment",
        "description": "Returns the user environment information: preferred language, local date and time, and timezone.",
        "parameters": get_user_environment_schema,
        "action": get_user_environment,
        "format_message": lambda args=None: "Getting user environment...",
    },
    {
        "name": "GetYouTubeVideoScript",
        "display_name": "YouTube Video Script",
        "description": "Returns a YouTube video script. Called when a YouTube video URL is detected in the user input.",
        "parameters": get_youtube_video_script_schema,
        "action": get_youtube_video_script,
        "format_message": format_video_script_message,
    },
    {
        "name": "VisitLinks",
        "display_name": "Visit Web Links",
        "description": "Visits the provided web links (URLs) and returns the content of the relevant pages (plain text).",
        "parameters": visit_links_schema,
        "action": visit_links,
        "format_message": format_visit_links_message,
    },
    {
        "name": "VisitLinksHtml",
        "display_name": "Visit Web Links (HTML)",
        "description": "Visits the provided web links (URLs) and returns the full HTML content of the relevant pages.",
        "parameters": visit_links_html_schema,
        "action": visit_links_html,
        "format_message": format_visit_links_html_message,
    },
]


def register_builtin_tools(manager):
    return [manager.register_function_tool(**tool) for tool in tools]
