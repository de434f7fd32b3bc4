import streamlit as st
from core.cart import CartStore
from core.i18n import LANGUAGES, Translations
from core.version import __version__

_NATIVE_NAMES = {lang["code"]: lang["native_name"] for lang in LANGUAGES}


def render_topbar(translations: Translations, store: CartStore) -> str:
    """Render the top bar and return the selected language code."""
    st.markdown(
        """
        <style>
        .flowbond-topbar {position:sticky; top:0; background-color:white; z-index:100; padding:4px 8px; border-bottom:1px solid #ddd;}
        .flowbond-topbar div[data-testid="stHorizontalBlock"] {align-items:center;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    codes = [lang["code"] for lang in LANGUAGES]
    current = st.session_state.get(
        "ui_lang", st.session_state.get("language", translations.default_language)
    )
    if current not in codes:
        current = translations.default_language
    t = translations.for_language(current)
    with st.container():
        st.markdown('<div class="flowbond-topbar">', unsafe_allow_html=True)
        left, center, right = st.columns([1, 2, 1])
        with left:
            st.markdown(f"**{t('app.title')} v{__version__}**")
        with center:
            st.caption(t("app.cartCount", count=store.get_item_count()))
        with right:
            language = st.selectbox(
                t("app.language"),
                codes,
                index=codes.index(current),
                format_func=lambda code: _NATIVE_NAMES.get(code, code),
                key="ui_lang",
            )
        st.markdown("</div>", unsafe_allow_html=True)
    st.session_state["language"] = language
    return language
