import logging
import random
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


def is_triggered(content, keyword: str) -> bool:
    # Sem strip e sensível a maiúsculas: a mensagem precisa começar com a palavra-chave
    return isinstance(content, str) and bool(keyword) and content.startswith(keyword)


def pick_response(responses: Sequence[str], rng: Optional[random.Random] = None) -> Optional[str]:
    if not responses:
        return None
    return (rng or random).choice(responses)


def handle_message_created(data, keyword, responses, on_match, rng=None) -> bool:
    """
    Filtra eventos message-created.

    Se o conteúdo começa com a palavra-chave, escolhe uma resposta aleatória e
    chama on_match(space_id, resposta). Retorna True quando algo foi agendado.
    A resposta HTTP ao webhook é sempre 200 vazia e fica a cargo do controller.
    """
    if not is_triggered(data.get("content"), keyword):
        return False

    space_id = data.get("spaceId")
    if not space_id:
        logger.info("Mensagem com %s sem spaceId, ignorada", keyword)
        return False

    answer = pick_response(responses, rng)
    if answer is None:
        logger.info("Tabela de respostas vazia, nada a enviar para o space %s", space_id)
        return False

    on_match(space_id, answer)
    return True
