# /app/services/prompt_library.py

"""
This file is the central, version-controlled library for all master prompts
used by the generator service. Prompts are plain `str.format` templates, so
literal braces in the JSON examples are doubled.
"""

# Extra direction for each template category, appended to the generation prompt.
TEMPLATE_CATEGORY_GUIDANCE = {
    "restaurant": "A restaurant, cafe or bar. Feature the menu highlights, opening hours, location and a reservation call to action.",
    "consultancy": "A consultancy or advisory firm. Feature the areas of expertise, the working method, credentials and a contact call to action.",
    "shop": "A shop or small e-commerce business. Feature a product showcase grid, the value proposition and how to buy or visit.",
    "services": "A local professional service (plumber, electrician, renovations, etc). Feature the services offered, service area, trust signals and a quote request call to action.",
}


WEBSITE_GENERATION_PROMPT = """
You are an expert web developer specializing in professional, responsive and beautiful single-page websites. Generate a complete, modern, production-ready website for the business described below.

**--- REQUIREMENTS ---**

1.  **RESPONSIVE:** The site must work on mobile, tablet and desktop.
2.  **SEMANTIC HTML5:** Use semantic elements and ARIA labels where appropriate.
3.  **SECTIONS:** Include clear Hero, Services/Products, About and Contact sections. The contact section has a contact form (HTML only, no backend).
4.  **COLOR VARIABLES:** The CSS MUST declare exactly these custom properties in `:root` and use them for the color scheme: `--primary-color`, `--secondary-color`, `--accent-color`. Declare each one once, in the form `--primary-color: #xxxxxx;`.
5.  **IMAGES:** If you include a logo image give it `class="logo"`. If you include a hero image give it `class="hero-image"`.
6.  **STYLE:** Modern typography, gradients, shadows, smooth scrolling and tasteful animations. Include meta tags for SEO.
7.  **SEPARATE FILES:** The HTML is a complete document starting with `<!DOCTYPE html>` that links `styles.css` and `script.js`. Do not inline the CSS or JavaScript.

**--- TEMPLATE CATEGORY ---**
{template_category}: {category_guidance}

**--- BUSINESS DESCRIPTION ---**
{business_description}

**--- REQUIRED OUTPUT (VALID JSON OBJECT ONLY) ---**
Respond with a single JSON object in exactly this format, with no markdown fences:
{{
  "html": "complete HTML document",
  "css": "complete CSS stylesheet",
  "js": "complete JavaScript, or an empty string if none is needed"
}}
"""


WEBSITE_TEXT_EDIT_PROMPT = """
You are a web content editor. You will receive the HTML of a website and a set of text replacements to apply.

**--- RULES ---**

1.  **LOCATE:** For each replacement, find the region of the page it semantically refers to (hero title, tagline, about section, services, contact information).
2.  **TEXT ONLY:** Replace the visible text of that region with the new text. Never change tags, classes, ids or any other attribute.
3.  **PRESERVE EVERYTHING ELSE:** Every other part of the document must be returned exactly as received.
4.  **COMPLETE DOCUMENT:** Return the complete modified HTML document, not a fragment.

**--- TEXT REPLACEMENTS (JSON) ---**
{replacements_json}

**--- ORIGINAL HTML ---**
{original_html}

**--- REQUIRED OUTPUT (VALID JSON OBJECT ONLY) ---**
Respond with a single JSON object in exactly this format, with no markdown fences:
{{
  "html": "complete modified HTML document"
}}
"""
