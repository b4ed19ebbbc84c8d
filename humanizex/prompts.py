"""LLM prompt templates and response schemas for each analysis mode."""

# ============================================================================
# PLAGIARISM PROMPTS
# ============================================================================

PLAGIARISM_PROMPT_INTROS = {
    "medium": (
        "Analyze the following text for plagiarism against public web sources. "
        "Identify any sections that are not original."
    ),
    "high": (
        "Analyze the following text for plagiarism against public web sources. "
        "Perform a thorough analysis and identify sections that show strong similarity, "
        "even if not directly copied."
    ),
    "strict": (
        "Perform a very strict plagiarism analysis on the following text against public "
        "web sources. Identify even remotely similar phrasing or sentence structures that "
        "might be considered unoriginal."
    ),
}

PLAGIARISM_PROMPT = """{intro} Quote every flagged section exactly as it appears in the text.

Text to analyze: "{text}\""""

PLAGIARISM_RESPONSE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "plagiarized_text": {
                "type": "string",
                "description": "The exact text segment identified as plagiarized.",
            },
            "source_url": {
                "type": "string",
                "description": "The URL of the suspected original source.",
            },
            "confidence_score": {
                "type": "number",
                "description": "A score from 0.0 to 1.0 indicating the confidence of the match.",
            },
        },
        "required": ["plagiarized_text", "source_url", "confidence_score"],
    },
}

# ============================================================================
# AI DETECTION PROMPTS
# ============================================================================

AI_DETECTION_PROMPT = """Analyze the following text to determine the likelihood that it was generated by an AI. Break the text down into segments and for each, determine if it is AI-generated and provide a confidence score. Focus on identifying unnatural phrasing, excessive complexity, or other AI-like patterns. Quote every segment exactly as it appears in the text.

Text to analyze: "{text}\""""

AI_DETECTION_RESPONSE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "text_segment": {
                "type": "string",
                "description": "The exact text segment being evaluated.",
            },
            "is_ai_generated": {
                "type": "boolean",
                "description": "True if the text segment is likely AI-generated, false otherwise.",
            },
            "confidence_score": {
                "type": "number",
                "description": (
                    "A score from 0.0 to 1.0 indicating the confidence that the segment "
                    "is AI-generated."
                ),
            },
        },
        "required": ["text_segment", "is_ai_generated", "confidence_score"],
    },
}

# ============================================================================
# HUMANIZE PROMPTS
# ============================================================================

HUMANIZE_STYLE_PROMPTS = {
    "default": (
        "Rewrite the following text to sound more natural, human, and engaging. "
        "Avoid robotic phrasing and complex sentence structures, but preserve the core "
        "meaning and information."
    ),
    "casual": (
        "Rewrite the following text to sound more casual and conversational. Use simpler "
        "language and a friendly tone, while keeping the original meaning intact."
    ),
    "formal": (
        "Rewrite the following text to adopt a more professional and formal tone. Use "
        "precise language, structured sentences, and an authoritative voice, while "
        "preserving the core information."
    ),
    "simple": (
        "Rewrite the following text to improve readability. Simplify complex sentences, "
        "use clearer vocabulary, and shorten paragraphs where appropriate. The goal is to "
        "make the content easy for anyone to understand."
    ),
    "creative": (
        "Rewrite the following text to be more creative and expressive. Use vivid "
        "language, metaphors, or storytelling elements where appropriate, while "
        "preserving the core meaning."
    ),
    "technical": (
        "Rewrite the following text with a focus on technical accuracy and clarity. Use "
        "precise, unambiguous language suitable for a knowledgeable audience. Maintain a "
        "formal and objective tone, ensuring the original technical information is "
        "preserved and well-structured."
    ),
    "enthusiastic": (
        "Rewrite the following text with an enthusiastic and energetic tone. Use positive "
        "and vibrant language, exclamation points where appropriate, while preserving the "
        "core meaning."
    ),
}

HUMANIZE_PROMPT = """{instructions} Respond only with the rewritten text. Here is the text to humanize: "{text}\""""

# ============================================================================
# SUMMARIZE PROMPTS
# ============================================================================

SUMMARY_LENGTH_PROMPTS = {
    "short": (
        "Summarize the following text in two or three sentences, keeping only the most "
        "important point."
    ),
    "medium": (
        "Summarize the following text in a single concise paragraph that covers its main "
        "points."
    ),
    "long": (
        "Write a detailed summary of the following text in a few paragraphs, covering the "
        "main points and the key supporting details."
    ),
}

SUMMARIZE_PROMPT = """{instructions} Respond only with the summary. Here is the text to summarize: "{text}\""""

# ============================================================================
# SYSTEM PROMPTS
# ============================================================================

DETECTION_SYSTEM = """You are a careful content-integrity analyst.
You respond with a JSON array only, following the requested schema exactly.
Every text field must quote the analyzed text verbatim, without paraphrasing."""

REWRITE_SYSTEM = """You are a skilled editor who rewrites text on request.
You respond only with the rewritten text, without introductions, notes, or quotation marks."""
