"""Prompt text sent to the AI provider for website generation."""

from app.schemas.ai import GenerateRequest, RegenerateSectionRequest
from app.utils.constants import DEFAULT_PRIMARY_COLOR, DEFAULT_SECTIONS

WEBSITE_SYSTEM_PROMPT = """You are a senior web designer at a top creative agency. You build polished, \
premium marketing websites that look custom-made.

DESIGN PRINCIPLES:
1. Clear visual hierarchy through size, colour and spacing
2. Generous whitespace (80px+ section padding)
3. Inter or Poppins from Google Fonts, 48-72px hero headlines
4. Subtle gradients on backgrounds and buttons
5. Soft layered shadows and smooth hover transitions
6. Real Unsplash image URLs for photography
7. Font Awesome 6 icons

TECHNICAL REQUIREMENTS:
- Google Fonts and Font Awesome CDN links in <head>
- Full viewport hero (min-height: 100vh) with a gradient overlay
- CSS Grid or Flexbox layouts, scroll-behavior: smooth
- Responsive media queries (@media max-width: 768px)
- Sticky navigation with backdrop blur
- Rounded cards (16-24px) that lift on hover

COLOUR USAGE:
- Brand colour for calls to action, accents and highlights
- Dark navy text (#1a1a2e), light gray (#f8fafc) alternating sections, white cards

OUTPUT FORMAT:
Return a JSON object with exactly two keys:
- "html": a complete HTML5 document starting with <!DOCTYPE html>
- "css": additional CSS, may be empty

Put ALL styling in a <style> tag inside <head>. Do NOT wrap the answer in markdown. \
Return ONLY the JSON object."""


def format_sections(sections: list[str]) -> str:
    """Numbered, capitalised section list, one per line."""
    return "\n".join(
        f"{index}. {section[:1].upper()}{section[1:]}"
        for index, section in enumerate(sections, start=1)
    )


def build_site_prompt(request: GenerateRequest) -> str:
    sections = request.sections or DEFAULT_SECTIONS
    primary_color = request.primary_color or DEFAULT_PRIMARY_COLOR
    business_name = request.business_name or "Untitled Business"
    business_type = request.business_type or "General business"
    description = request.description or request.prompt

    prompt = f"""Create a stunning, launch-ready website for:

BUSINESS: {business_name}
TYPE: {business_type}
ABOUT: {description}
BRAND COLOR: {primary_color}

SECTIONS TO INCLUDE:
{format_sections(sections)}

SECTION GUIDANCE:
- Hero: gradient overlay on a relevant Unsplash image, bold headline, supporting text, primary and secondary call to action
- Features: 3-4 icon cards with hover lift
- About: split image and text layout with the brand story
- Testimonials: 3 cards with avatar, quote, name and title
- Pricing: 3 tiers with the middle tier highlighted
- Contact: clean form next to contact details
- Footer: multi-column layout with social links and copyright"""

    if request.description and request.prompt != request.description:
        prompt += f"\n\nADDITIONAL REQUEST FROM THE CLIENT:\n{request.prompt}"

    return prompt


def build_section_prompt(request: RegenerateSectionRequest) -> str:
    return f"""I have an existing website. Modify the "{request.section_name}" section according to these instructions:

INSTRUCTIONS: {request.instructions}

CURRENT WEBSITE HTML:
{request.current_html}

REQUIREMENTS:
1. Keep the overall design consistent
2. Only modify the requested section and keep every other section exactly the same
3. Maintain the same quality, styling and responsiveness

Return the COMPLETE updated HTML with embedded CSS as a JSON object with "html" and "css" keys.
The HTML must be the full document, not just the section."""
