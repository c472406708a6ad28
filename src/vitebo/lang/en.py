# src/vitebo/lang/en.py
"""English strings."""

STRINGS: dict[str, str] = {
    # ── home page ──────────────────────────────────────────────────────────
    "home.meta.title": "Home",
    "home.meta.description": (
        "I write about web development, software engineering, and other "
        "topics I am passionate about."
    ),
    "home.title": "Hi, I'm Vitebo",
    "home.welcome": (
        "I am a software developer and this is my personal website. Here you "
        "can find information about me, my projects and articles I write. "
        "Welcome!"
    ),
    "home.latest-posts": "Latest posts",
    "home.see-all-posts": "See all posts",
    "home.contact-me-title": "Let's Connect",
    "home.contact-me-description": (
        "If you want to get in touch with me about something or just to say "
        "hi, reach out on social media or send me an email."
    ),

    # ── blog ───────────────────────────────────────────────────────────────
    "blog.meta.title": "Blog",
    "blog.meta.description": (
        "A collection of articles on topics I am passionate about."
    ),

    # ── language picker / navigation ───────────────────────────────────────
    "language-picker.pt-br": "Portuguese",
    "language-picker.en": "English",
    "nav.blog": "Blog",
}
