"""Bilingual keyword tables for entity types and command verbs.

Both tables are keyed first by canonical concept and then by language, and
every concept carries an entry for every language. Iteration order is part of
the contract: the first concept whose variants match wins.
"""

from enum import Enum
from types import MappingProxyType


class Language(str, Enum):
    EN = "en"
    PT = "pt"


class EntityType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"
    INVESTMENT = "investment"
    HABIT = "habit"
    OBJECTIVE = "objective"
    KEY_RESULT = "key_result"
    ACTION = "action"
    CONTRIBUTION = "contribution"


class Verb(str, Enum):
    ADD = "add"
    LIST = "list"
    UPDATE = "update"
    SHOW = "show"
    VIEW = "view"
    DELETE = "delete"
    EDIT = "edit"
    LINK = "link"
    UNKNOWN = "unknown"


def _freeze(table):
    return MappingProxyType(
        {key: MappingProxyType(dict(per_language)) for key, per_language in table.items()}
    )


ENTITY_KEYWORDS = _freeze({
    EntityType.EXPENSE: {
        Language.EN: ("expense", "expenses", "spending", "spend", "cost", "costs", "gasto", "gastos"),
        Language.PT: ("despesa", "despesas", "gasto", "gastos", "gastar"),
    },
    EntityType.INCOME: {
        Language.EN: ("income", "incomes", "salary", "salaries", "earnings", "earning"),
        Language.PT: ("receita", "receitas", "salário", "salários", "ganho", "ganhos"),
    },
    EntityType.INVESTMENT: {
        Language.EN: ("investment", "investments", "invest", "investing"),
        Language.PT: ("investimento", "investimentos", "investir"),
    },
    EntityType.HABIT: {
        Language.EN: ("habit", "habits"),
        Language.PT: ("hábito", "hábitos", "habito", "habitos"),
    },
    EntityType.OBJECTIVE: {
        Language.EN: ("objective", "objectives", "goal", "goals", "okr", "okrs"),
        Language.PT: ("objetivo", "objetivos", "meta", "metas", "okr", "okrs"),
    },
    EntityType.KEY_RESULT: {
        Language.EN: ("key result", "key results", "kr", "krs"),
        Language.PT: ("resultado-chave", "resultado chave", "resultados-chave", "resultados chave", "rc", "rcs", "kr", "krs"),
    },
    EntityType.ACTION: {
        Language.EN: ("action", "actions", "task", "tasks"),
        Language.PT: ("ação", "ações", "acao", "acoes", "tarefa", "tarefas"),
    },
    EntityType.CONTRIBUTION: {
        Language.EN: ("contribution", "contributions", "deposit", "deposits"),
        Language.PT: ("contribuição", "contribuições", "contribuicao", "contribuicoes", "aporte", "aportes"),
    },
})

# "show", "view" and "edit" appear under earlier verbs too; the later entries
# are reached through their remaining variants.
VERB_KEYWORDS = _freeze({
    Verb.ADD: {
        Language.EN: ("add", "create", "new", "insert"),
        Language.PT: ("adicionar", "adiciona", "criar", "cria", "novo", "nova", "inserir"),
    },
    Verb.LIST: {
        Language.EN: ("list", "show", "view", "see", "all"),
        Language.PT: ("listar", "lista", "mostrar", "mostra", "ver", "ver todos", "todos", "todas"),
    },
    Verb.UPDATE: {
        Language.EN: ("update", "edit", "change", "modify"),
        Language.PT: ("atualizar", "atualiza", "editar", "edita", "alterar", "altera", "modificar"),
    },
    Verb.SHOW: {
        Language.EN: ("show", "view", "see", "display"),
        Language.PT: ("mostrar", "mostra", "ver", "visualizar", "exibir"),
    },
    Verb.VIEW: {
        Language.EN: ("view", "see", "show", "display", "details", "detail"),
        Language.PT: ("ver", "visualizar", "mostrar", "mostra", "exibir", "detalhes", "detalhar"),
    },
    Verb.DELETE: {
        Language.EN: ("delete", "remove", "del", "rm"),
        Language.PT: ("deletar", "deleta", "excluir", "exclui", "remover", "remove", "apagar", "apaga"),
    },
    Verb.EDIT: {
        Language.EN: ("edit", "fix", "correct"),
        Language.PT: ("editar", "corrigir", "corrige", "ajustar", "ajusta"),
    },
    Verb.LINK: {
        Language.EN: ("link", "connect", "attach"),
        Language.PT: ("vincular", "vincula", "ligar", "liga", "conectar"),
    },
})


def normalize_language(language_code: str | None, default: Language = Language.PT) -> Language:
    """Map a client language code such as ``pt-BR`` or ``en-US`` to a Language."""
    if not language_code:
        return default
    prefix = language_code.lower().replace("_", "-").split("-")[0]
    return Language.EN if prefix == Language.EN.value else Language.PT


def detect_entity_type(text: str, language: Language) -> EntityType | None:
    """Loose pass: any variant contained anywhere in ``text``."""
    lowered = text.lower().strip()
    for entity_type, keywords in ENTITY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords[language]):
            return entity_type
    return None


def match_entity_token(token: str, language: Language) -> EntityType | None:
    """Strict pass: ``token`` must equal one of the variants."""
    lowered = token.lower().strip()
    for entity_type, keywords in ENTITY_KEYWORDS.items():
        if lowered in keywords[language]:
            return entity_type
    return None


def detect_verb(text: str, language: Language) -> Verb | None:
    """Match a verb variant at a word boundary at the start of ``text``."""
    lowered = text.lower().strip()
    for verb, keywords in VERB_KEYWORDS.items():
        if any(lowered == keyword or lowered.startswith(keyword + " ") for keyword in keywords[language]):
            return verb
    return None
