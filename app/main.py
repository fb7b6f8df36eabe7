"""
Streamlit Frontend for Family Finance

A small demo of the screens the mock data is built for:
- Dashboard: per-member spending and the transaction list for a period
- Family settings: rename family members

Names are saved to the configured name store. Set
FAMILY_FINANCE_NAMES_STORE_PATH to keep them between runs.
"""

import html
from datetime import date

import streamlit as st

from family_finance import FamilyDataProvider, create_provider
from family_finance.queries import describe_date_range
from family_finance.services.storage import StorageError


# Page configuration
st.set_page_config(
    page_title="Family Finance",
    page_icon="👪",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .member-card {
        padding: 16px;
        border-radius: 10px;
        color: #ffffff;
        margin: 10px 0;
    }
    .member-initial {
        font-size: 2em;
        font-weight: bold;
    }
</style>
""", unsafe_allow_html=True)


# The seed transactions cover the second half of November 2025
DEFAULT_START = date(2025, 11, 20)
DEFAULT_END = date(2025, 11, 30)


@st.cache_resource
def get_provider() -> FamilyDataProvider:
    """Get or create the data provider (cached)."""
    return create_provider()


def main():
    """Main application entry point."""
    provider = get_provider()

    st.sidebar.title("👪 Family Finance")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["📊 Dashboard", "⚙️ Family Settings"],
        index=0,
    )

    if page == "📊 Dashboard":
        render_dashboard_page(provider)
    elif page == "⚙️ Family Settings":
        render_family_settings_page(provider)


def render_dashboard_page(provider: FamilyDataProvider):
    """Render per-member totals and the transaction list."""
    st.title("📊 Family Spending")

    date_range = st.date_input(
        "Period",
        value=(DEFAULT_START, DEFAULT_END),
    )
    # The picker returns a single date while the user is mid-selection
    if not isinstance(date_range, (list, tuple)) or len(date_range) != 2:
        st.info("Select an end date to see transactions.")
        st.stop()
    start, end = date_range

    st.markdown("### Spending by member")
    st.caption("All-time expenses")
    totals = provider.expense_totals_by_member()
    columns = st.columns(len(totals))
    for column, member in zip(columns, provider.list_family_members()):
        with column:
            st.markdown(f"""
            <div class="member-card" style="background-color: {member.color};">
                <div class="member-initial">{html.escape(member.icon_initial)}</div>
                <div>{html.escape(member.current_name)} · {html.escape(member.role)}</div>
                <div><strong>{totals.get(member.id.value, 0):,}</strong></div>
            </div>
            """, unsafe_allow_html=True)

    st.markdown("---")
    st.markdown(f"### Transactions {describe_date_range(start, end)}")

    transactions = provider.query_transactions(start, end)
    if not transactions:
        st.info("No transactions in this period.")
        return

    st.dataframe(
        [t.to_row() for t in transactions],
        hide_index=True,
        use_container_width=True,
    )


def render_family_settings_page(provider: FamilyDataProvider):
    """Render the form for renaming family members."""
    st.title("⚙️ Family Settings")
    st.markdown("Choose how each family member is shown in reports.")

    for member in provider.list_family_members():
        member_id = member.id.value
        key = provider.names.store_key(member_id)

        st.markdown(f"#### {member.role}")
        col1, col2, col3 = st.columns([3, 1, 1])

        with col1:
            new_name = st.text_input(
                "Name",
                value=member.current_name,
                key=f"name_input_{member_id}",
                help=f"Default: {provider.names.default_name(member_id)}",
            )

        with col2:
            if st.button("💾 Save", key=f"save_{member_id}"):
                try:
                    if new_name.strip():
                        provider.store.set_item(key, new_name.strip())
                    else:
                        provider.store.remove_item(key)
                    st.rerun()
                except StorageError as e:
                    st.error(f"Failed to save: {str(e)}")

        with col3:
            if st.button("↩️ Reset", key=f"reset_{member_id}"):
                try:
                    provider.store.remove_item(key)
                    # Drop the widget state so the input shows the default again
                    st.session_state.pop(f"name_input_{member_id}", None)
                    st.rerun()
                except StorageError as e:
                    st.error(f"Failed to reset: {str(e)}")


if __name__ == "__main__":
    main()
