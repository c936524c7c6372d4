def get_selector_config() -> dict[str, str]:
    return {
        "status_container": "div.p-3",
        "next_location": "strong.text-lightgreen",
        "countdown": "div[data-minervacountdown]",
        "countdown_attr": "data-minervacountdown",
        "schedule_rows": "figure.is-style-stripes table tbody tr",
        "active_row_class": "bg-dark",
    }
