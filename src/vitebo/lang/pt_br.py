# src/vitebo/lang/pt_br.py
"""Brazilian Portuguese strings (default locale)."""

STRINGS: dict[str, str] = {
    # ── home page ──────────────────────────────────────────────────────────
    "home.meta.title": "Início",
    "home.meta.description": (
        "Escrevo sobre desenvolvimento web, engenharia de software e outros "
        "tópicos sobre os quais sou apaixonado."
    ),
    "home.title": "Oi, eu sou Vitebo",
    "home.welcome": (
        "Eu sou um desenvolvedor de software e este é o meu site pessoal. "
        "Aqui você pode encontrar informações sobre mim, meus projetos e "
        "artigos que escrevo. Seja bem-vindo!"
    ),
    "home.latest-posts": "Últimos artigos",
    "home.see-all-posts": "Ver todos os artigos",
    "home.contact-me-title": "Entre em contato comigo",
    "home.contact-me-description": (
        "Se você quiser entrar em contato comigo sobre algo ou apenas dizer "
        "um oi, entre em contato pelas redes sociais ou envie-me um e-mail."
    ),

    # ── blog ───────────────────────────────────────────────────────────────
    "blog.meta.title": "Blog",
    "blog.meta.description": (
        "Uma coleção de artigos sobre tópicos sobre os quais sou apaixonado."
    ),

    # ── language picker / navigation ───────────────────────────────────────
    "language-picker.pt-br": "Português",
    "language-picker.en": "Inglês",
    "nav.blog": "Blog",
}
