"""Shared layout primitives for the UnitLedger Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from typing import Iterable

import streamlit as st
from streamlit.components.v1 import html as components_html

from config.categories import TYPE_LABELS, categories_for
from core import TransactionStore, create_transaction


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    title: str
    caption: str


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink(
        "dashboard",
        "Dashboard",
        "Ringkasan Keuangan",
        "Pantau arus kas dan kesehatan finansial Anda.",
    ),
    NavigationLink(
        "transactions",
        "Transaksi",
        "Riwayat Transaksi",
        "Daftar lengkap pemasukan dan pengeluaran.",
    ),
    NavigationLink(
        "analysis",
        "Analisis AI",
        "Analisis Cerdas",
        "Dapatkan wawasan mendalam dari data keuangan Anda.",
    ),
)

APP_TITLE = "Laporan Keuangan Kegiatan Kerja"


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 16px;
            --card-bg: #FFFFFF;
            --border: #E2E8F0;
            --shadow: 0 1px 2px rgba(15, 23, 42, 0.05), 0 1px 3px rgba(15, 23, 42, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F8FAFC;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2rem;
            padding-bottom: 4rem;
          }

          .ul-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .ul-nav__brand {
            font-size: 1.25rem;
            font-weight: 700;
            color: #1E293B;
          }

          .ul-nav__links {
            display: flex;
            align-items: center;
            gap: 1.6rem;
          }

          .ul-nav__link,
          .ul-nav__link:visited {
            font-weight: 600;
            color: #64748B;
            text-decoration: none;
          }

          .ul-nav__link:hover,
          .ul-nav__link.is-active {
            color: #4338CA;
          }

          @media (max-width: 768px) {
            .ul-nav {
              flex-direction: column;
              align-items: flex-start;
              gap: 0.75rem;
            }
          }

          .ul-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .ul-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
          }

          .ul-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #1E293B;
          }

          .ul-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #C7D2FE;
            background: #EEF2FF;
            color: #4338CA;
            white-space: nowrap;
          }

          .ul-amount--income { color: #059669; font-weight: 700; }
          .ul-amount--expense { color: #DC2626; font-weight: 700; }

          @media print {
            header, footer, [data-testid="stSidebar"], .ul-nav, .ul-no-print {
              display: none !important;
            }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable UnitLedger card."""

    chip_html = f'<span class="ul-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="ul-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="ul-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_navbar(active_page: str) -> None:
    """Render the navigation bar with active state."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        css_class = "ul-nav__link"
        aria_current = ""
        if link.slug == active_page:
            css_class += " is-active"
            aria_current = ' aria-current="page"'
        link_markup.append(
            f'<a class="{css_class}" href="?page={link.slug}"{aria_current} target="_self">{link.label}</a>'
        )

    st.markdown(
        f"""
        <nav class="ul-nav">
            <div class="ul-nav__brand">{APP_TITLE}</div>
            <div class="ul-nav__links">{''.join(link_markup)}</div>
        </nav>
        """,
        unsafe_allow_html=True,
    )
    _enforce_same_tab_navigation()


def render_page_header(active_page: str) -> None:
    for link in NAV_LINKS:
        if link.slug == active_page:
            st.title(link.title)
            st.caption(link.caption)
            return


def render_add_transaction_form(store: TransactionStore) -> None:
    """Render the sidebar form that appends a new transaction to ``store``."""

    with st.sidebar:
        st.markdown("### Tambah Transaksi")
        kind = st.radio(
            "Tipe",
            options=list(TYPE_LABELS),
            index=1,
            format_func=lambda value: TYPE_LABELS[value],
            horizontal=True,
            key="new_txn_type",
        )
        with st.form("add-transaction", clear_on_submit=True):
            amount = st.number_input("Jumlah (Rp)", min_value=0.0, value=None, step=1000.0, placeholder="0")
            category = st.selectbox(
                "Kategori",
                options=list(categories_for(kind)),
                index=None,
                placeholder="Pilih Kategori",
            )
            txn_date = st.date_input("Tanggal", value=date.today())
            description = st.text_input("Keterangan", placeholder="Contoh: Borongan jahit seragam")
            submitted = st.form_submit_button("Simpan Transaksi", type="primary", use_container_width=True)

        if submitted:
            transaction = create_transaction(
                type=kind,
                amount=amount,
                category=category,
                date=txn_date,
                description=description,
            )
            if transaction is None:
                st.warning("Lengkapi semua kolom dan pastikan jumlah lebih dari nol.")
            else:
                store.add(transaction)
                st.success("Transaksi tersimpan.")


def trigger_print() -> None:
    """Open the browser print dialog for the current page."""

    components_html("<script>window.parent.print();</script>", height=0, width=0)


def _enforce_same_tab_navigation() -> None:
    """Ensure navigation links stay within the same browser tab."""

    components_html(
        """
        <script>
        (function() {
          if (window.parent && !window.parent.__ulNavSameTab) {
            window.parent.__ulNavSameTab = true;
            const enforce = () => {
              const anchors = window.parent.document.querySelectorAll('a.ul-nav__link');
              anchors.forEach((anchor) => {
                if (anchor.target && anchor.target.toLowerCase() !== '_self') {
                  anchor.target = '_self';
                }
              });
            };
            enforce();
            const observer = new MutationObserver(enforce);
            observer.observe(window.parent.document.body, { childList: true, subtree: true });
          }
        })();
        </script>
        """,
        height=0,
        width=0,
    )


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    params = st.query_params
    default_page = st.session_state.get("active_page", "dashboard")
    raw_page = params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else "dashboard"

    if st.session_state.get("active_page") != page:
        st.session_state["active_page"] = page

    if params.get("page") != page:
        st.query_params["page"] = page

    return page


__all__ = [
    "APP_TITLE",
    "NAV_LINKS",
    "NavigationLink",
    "card",
    "determine_active_page",
    "inject_css",
    "render_add_transaction_form",
    "render_navbar",
    "render_page_header",
    "trigger_print",
]
