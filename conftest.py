"""Global pytest configuration."""

import os

# Keep tests off real AI providers before any settings are read
os.environ["OPENAI_API_KEY"] = ""
os.environ["GEMINI_API_KEY"] = ""
