# Perplexity exposes an OpenAI-compatible chat-completions endpoint under this base URL.
PERPLEXITY_BASE_URL = "https://api.perplexity.ai"
REMOTE_MODEL = "llama-3.1-sonar-small-128k-online"

# Sampling parameters are fixed so that the same prompt yields comparable rewrites.
GENERATION_CONFIG = {
    "temperature": 0.3,
    "top_p": 0.9,
    "max_tokens": 1500,
    "frequency_penalty": 0.1,
    "presence_penalty": 0,
}

# Perplexity-only request fields, not part of the OpenAI schema.
PERPLEXITY_EXTRA_BODY = {
    "return_images": False,
    "return_related_questions": False,
}

USER_PROMPT_TEMPLATE = 'Please improve this prompt:\n\n"{prompt}"'

PROMPT_IMPROVEMENT_SYSTEM_PROMPT = """
You are an expert AI prompt engineer. Your role is to analyze and improve user prompts to make them more effective, specific, and likely to produce high-quality results from AI models.

When improving a prompt, consider these key principles:

1. **Clarity & Specificity**: Make vague requests more specific and actionable
2. **Context & Background**: Add relevant context that helps the AI understand the use case
3. **Structure & Format**: Specify desired output format, length, and structure
4. **Role Definition**: Define the AI's role or expertise area when appropriate
5. **Examples & Constraints**: Include examples or constraints to guide the response
6. **Tone & Style**: Specify the desired tone, style, or audience level

Your improvements should:
- Preserve the original intent while making it more effective
- Add specific details that enhance clarity without being overwhelming
- Include formatting instructions when the output structure matters
- Suggest relevant context or background information
- Maintain a natural, conversational flow
- Be concise but comprehensive

Return ONLY the improved prompt without any explanation or meta-commentary. The improved prompt should be ready to use immediately.
""".strip()

# User-facing notification copy returned alongside each improvement.
SUCCESS_TITLE = "Prompt improved!"
LOCAL_SUCCESS_DESCRIPTION = "Your prompt has been enhanced with demo improvements."
REMOTE_SUCCESS_DESCRIPTION = "Your prompt has been enhanced using AI analysis."
FAILURE_TITLE = "Error improving prompt"
