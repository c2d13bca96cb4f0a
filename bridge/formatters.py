from typing import Tuple


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


def extract_target_name(targets) -> str:
    if not isinstance(targets, list) or not targets:
        return ""
    first = targets[0]
    if isinstance(first, dict):
        return _text(first.get("name"))
    return ""


def format_incident(data) -> Tuple[str, str, str]:
    """
    Converte o payload de alerta do New Relic em (título, texto, estado).

    Campos ausentes viram string vazia para que um payload parcial ainda gere
    uma mensagem.
    """
    state = _text(data.get("current_state"))
    title = f"Incident {state} {extract_target_name(data.get('targets'))} {_text(data.get('condition_name'))}"
    text = (
        f"{_text(data.get('details'))}\n"
        f"Link: [Incident {_text(data.get('incident_id'))}]({_text(data.get('incident_url'))})"
    )
    return title, text, state
