"""User-facing strings in both supported languages.

Keys are dotted (``messages.expense_added``). Lookups fall back to Portuguese
and then to the key itself, so a missing translation never breaks a reply.
"""

from tally.commands.keywords import EntityType, Language

TRANSLATIONS: dict[Language, dict[str, dict[str, str]]] = {
    Language.EN: {
        "entities": {
            "expense": "expense",
            "income": "income",
            "investment": "investment",
            "habit": "habit",
            "objective": "objective",
            "key_result": "key result",
            "action": "action",
            "contribution": "contribution",
        },
        "messages": {
            "welcome": "Welcome to Tally! 👋\n\nI'll help you manage your finances and goals.",
            "welcome_back": "Welcome back, {name}! 👋",
            "referral_code": "Your referral code: {code}",
            "referred_by_friend": "You were referred by a friend! 🎉",
            "use_help": "Use /help to see available commands.",
            "referral_link": "🔗 Your referral link:\n\n{link}\n\nShare this link with friends to invite them!",
            "please_start": "Please start the bot first with /start",
            "expense_added": "✅ Expense added!",
            "income_added": "✅ Income added!",
            "investment_added": "✅ Investment added!",
            "investment_updated": "✅ Investment updated!",
            "contribution_added": "✅ Contribution added!",
            "habit_added": "✅ Habit added!",
            "habit_logged": "✅ Habit logged!",
            "habit_linked": "✅ Habit linked to action!",
            "objective_added": "✅ Objective added!",
            "key_result_added": "✅ Key result added!",
            "key_result_updated": "✅ Key result updated!",
            "action_added": "✅ Action added!",
            "progress_updated": "✅ Progress updated!",
            "renamed": "✅ Renamed to {name}.",
            "amount_updated": "✅ Amount updated to {amount}.",
            "deleted": "🗑️ Deleted {entity} #{id}: {name}",
            "counted_as_day": "Counted as 1 day!",
            "language_set": "✅ Language set to English.",
            "current_language": "Current language: English. Use /language pt or /language en.",
            "invalid_amount": "❌ Invalid amount. Please provide a valid number.\nExample: 50.00 or 50,00",
            "invalid_date": "❌ Invalid date format. Use YYYY-MM-DD",
            "missing_name_or_type": "❌ Please provide both name and type.\nExample: /addinvestment \"emergency fund\" CDB 84203,72",
            "missing_details": "❌ Some details are missing.",
            "not_found": "❌ {entity} \"{identifier}\" not found. Use /list {alias} to see IDs.",
            "not_supported": "❌ That operation is not available for {entity}.",
            "no_expenses": "📊 No expenses recorded for this month.",
            "no_incomes": "📊 No incomes recorded for this month.",
            "no_transactions": "📊 No transactions recorded for this month.",
            "no_investments": "📈 No investments recorded yet.",
            "no_habits": "📊 No habits found. Create one with /addhabit",
            "no_okrs": "📊 No OKRs found. Create one with /addobjective",
            "no_records": "📭 Nothing recorded yet.",
            "report_sent": "✅ Report CSV generated and sent!",
        },
        "labels": {
            "amount": "Amount",
            "description": "Description",
            "category": "Category",
            "date": "Date",
            "name": "Name",
            "type": "Type",
            "notes": "Notes",
            "purchase_date": "Purchase date",
            "invested": "Invested",
            "current": "Current",
            "return": "Return",
            "current_value": "Current value",
            "total_invested": "Total invested",
            "total_value": "Total value",
            "total_return": "Total return",
            "total": "Total",
            "transactions": "Transactions",
            "by_category": "By category",
            "ai_insight": "AI insight",
            "frequency": "Frequency",
            "daily": "Daily",
            "weekly": "{count}x per week",
            "value": "Value",
            "target": "Target",
            "progress": "Progress",
            "days_this_year": "{days} days this year ({percentage}%)",
            "streak": "Streak: {days} days",
            "year": "Year",
            "completed": "Completed: {days} days",
            "total_days": "Total days: {days}",
            "percentage": "Percentage: {percentage}%",
            "monthly_report": "Monthly report - {period}",
            "incomes_title": "Incomes - {period}",
            "categories_title": "Expenses by category ({period})",
            "investments_title": "Your investments",
            "okrs_title": "Your OKRs",
            "habits_title": "Your habits",
            "habit_review": "Habit review {year}",
            "habit_progress": "Habit progress {year}",
            "statistics": "Statistics",
            "action_id": "Action ID",
            "list_title": "Your {entity} records",
            "income_row": "Income",
            "expense_row": "Expense",
            "balance": "Balance",
            "total_income": "Total income",
            "total_expenses": "Total expenses",
        },
        "errors": {
            "generic": "❌ An error occurred. Please try again.",
        },
        "usage": {
            "add": "Usage: /add <amount> <description>\nExample: /add 50.00 Coffee\nExample: /add 50,00 Coffee (comma works too)\nOr: /add <entity> <details>, e.g. /add investment \"emergency fund\" CDB 1000",
            "income": "Usage: /income <amount> <description>\nExample: /income 5000.00 Salary",
            "addinvestment": "Usage: /addinvestment <name> <type> <amount> [date]\nExamples:\n  /addinvestment \"emergency fund\" CDB 84203.72\n  /addinvestment \"emergency fund\" CDB 84203,72\n  /addinvestment Bitcoin Crypto 1000.00 2024-01-15\nDate is optional and defaults to today. Quote names with spaces.",
            "updateinvestment": "Usage: /updateinvestment <id or name> <current_value>\nExample: /updateinvestment 1 1200.00",
            "addobjective": "Usage: /addobjective <title>\nExample: /addobjective \"Run a marathon\"",
            "addkr": "Usage: /addkr <objective> <title> [target]\nExample: /addkr 1 \"Long runs\" 42",
            "addaction": "Usage: /addaction <key result> <description>\nExample: /addaction 1 \"Train 4x per week\"",
            "updateprogress": "Usage: /updateprogress <action> <progress>\nExample: /updateprogress 1 \"2/52\"",
            "okr": "Usage: /okr <objective>\nExample: /okr 1",
            "addhabit": "Usage: /addhabit <name> <frequency>\nExample: /addhabit workout \"4x per week\"",
            "habit": "Usage: /habit <name> [value] [date]\nExample: /habit workout\nExample: /habit water 2L\nExample: /habit workout 2024-01-15",
            "habitstats": "Usage: /habitstats <name>\nExample: /habitstats workout",
            "linkhabit": "Usage: /linkhabit <habit> <action>\nExample: /linkhabit workout 1",
            "generic": "Usage: /<verb> <entity> <details>\nVerbs: add, list, update, edit, show, view, delete, link\nEntities: expense, income, investment, contribution, habit, objective, kr, action\nExample: /delete kr \"long runs\"",
        },
        "help": {
            "text": (
                "📚 Tally commands:\n\n"
                "💰 Expenses:\n  /add <amount> <description>\n  /report - monthly report\n  /categories - expenses by category\n  /reportcsv - monthly CSV\n\n"
                "💵 Incomes:\n  /income <amount> <description>\n  /incomes - this month's incomes\n\n"
                "📈 Investments:\n  /investments\n  /addinvestment <name> <type> <amount> [date]\n  /updateinvestment <id> <value>\n  /add contribution <investment> <amount> [date]\n\n"
                "🎯 OKRs:\n  /okrs\n  /okr <objective>\n  /addobjective <title>\n  /addkr <objective> <title> [target]\n  /addaction <kr> <description>\n  /updateprogress <action> <progress>\n\n"
                "🏋️ Habits:\n  /habits\n  /addhabit <name> <frequency>\n  /habit <name> [value] [date]\n  /habit review\n  /habitstats <name>\n  /habitprogress\n  /linkhabit <habit> <action>\n\n"
                "🧭 Generic: /list, /show, /view, /update, /edit, /delete, /link <entity> ...\n\n"
                "⚙️ /language <en|pt>, /refer, /help"
            ),
        },
    },
    Language.PT: {
        "entities": {
            "expense": "despesa",
            "income": "receita",
            "investment": "investimento",
            "habit": "hábito",
            "objective": "objetivo",
            "key_result": "resultado-chave",
            "action": "ação",
            "contribution": "contribuição",
        },
        "messages": {
            "welcome": "Bem-vindo ao Tally! 👋\n\nVou te ajudar a cuidar das suas finanças e metas.",
            "welcome_back": "Bem-vindo de volta, {name}! 👋",
            "referral_code": "Seu código de indicação: {code}",
            "referred_by_friend": "Você foi indicado por um amigo! 🎉",
            "use_help": "Use /help para ver os comandos disponíveis.",
            "referral_link": "🔗 Seu link de indicação:\n\n{link}\n\nCompartilhe com amigos para convidá-los!",
            "please_start": "Por favor, inicie o bot primeiro com /start",
            "expense_added": "✅ Despesa adicionada!",
            "income_added": "✅ Receita adicionada!",
            "investment_added": "✅ Investimento adicionado!",
            "investment_updated": "✅ Investimento atualizado!",
            "contribution_added": "✅ Aporte adicionado!",
            "habit_added": "✅ Hábito adicionado!",
            "habit_logged": "✅ Hábito registrado!",
            "habit_linked": "✅ Hábito vinculado à ação!",
            "objective_added": "✅ Objetivo adicionado!",
            "key_result_added": "✅ Resultado-chave adicionado!",
            "key_result_updated": "✅ Resultado-chave atualizado!",
            "action_added": "✅ Ação adicionada!",
            "progress_updated": "✅ Progresso atualizado!",
            "renamed": "✅ Renomeado para {name}.",
            "amount_updated": "✅ Valor atualizado para {amount}.",
            "deleted": "🗑️ {entity} #{id} excluído(a): {name}",
            "counted_as_day": "Contado como 1 dia!",
            "language_set": "✅ Idioma definido para Português.",
            "current_language": "Idioma atual: Português. Use /language pt ou /language en.",
            "invalid_amount": "❌ Valor inválido. Por favor, forneça um número válido.\nExemplo: 50.00 ou 50,00",
            "invalid_date": "❌ Formato de data inválido. Use AAAA-MM-DD",
            "missing_name_or_type": "❌ Informe o nome e o tipo.\nExemplo: /addinvestment \"reserva de emergencia\" CDB 84203,72",
            "missing_details": "❌ Faltam informações no comando.",
            "not_found": "❌ {entity} \"{identifier}\" não encontrado(a). Use /list {alias} para ver os IDs.",
            "not_supported": "❌ Essa operação não está disponível para {entity}.",
            "no_expenses": "📊 Nenhuma despesa registrada neste mês.",
            "no_incomes": "📊 Nenhuma receita registrada neste mês.",
            "no_transactions": "📊 Nenhuma transação registrada neste mês.",
            "no_investments": "📈 Nenhum investimento registrado ainda.",
            "no_habits": "📊 Nenhum hábito encontrado. Crie um com /addhabit",
            "no_okrs": "📊 Nenhum OKR encontrado. Crie um com /addobjective",
            "no_records": "📭 Nada registrado ainda.",
            "report_sent": "✅ Relatório CSV gerado e enviado!",
        },
        "labels": {
            "amount": "Valor",
            "description": "Descrição",
            "category": "Categoria",
            "date": "Data",
            "name": "Nome",
            "type": "Tipo",
            "notes": "Notas",
            "purchase_date": "Data da compra",
            "invested": "Investido",
            "current": "Atual",
            "return": "Retorno",
            "current_value": "Valor atual",
            "total_invested": "Total investido",
            "total_value": "Valor total",
            "total_return": "Retorno total",
            "total": "Total",
            "transactions": "Transações",
            "by_category": "Por categoria",
            "ai_insight": "Dica da IA",
            "frequency": "Frequência",
            "daily": "Diário",
            "weekly": "{count}x por semana",
            "value": "Valor",
            "target": "Meta",
            "progress": "Progresso",
            "days_this_year": "{days} dias este ano ({percentage}%)",
            "streak": "Sequência: {days} dias",
            "year": "Ano",
            "completed": "Concluído: {days} dias",
            "total_days": "Total de dias: {days}",
            "percentage": "Porcentagem: {percentage}%",
            "monthly_report": "Relatório mensal - {period}",
            "incomes_title": "Receitas - {period}",
            "categories_title": "Despesas por categoria ({period})",
            "investments_title": "Seus investimentos",
            "okrs_title": "Seus OKRs",
            "habits_title": "Seus hábitos",
            "habit_review": "Revisão de hábitos {year}",
            "habit_progress": "Progresso dos hábitos {year}",
            "statistics": "Estatísticas",
            "action_id": "ID da ação",
            "list_title": "Seus registros de {entity}",
            "income_row": "Receita",
            "expense_row": "Despesa",
            "balance": "Saldo",
            "total_income": "Total de receitas",
            "total_expenses": "Total de despesas",
        },
        "errors": {
            "generic": "❌ Ocorreu um erro. Por favor, tente novamente.",
        },
        "usage": {
            "add": "Uso: /add <valor> <descrição>\nExemplo: /add 50.00 Café\nExemplo: /add 50,00 Café (vírgula também funciona)\nOu: /add <entidade> <detalhes>, ex. /add investimento \"reserva de emergencia\" CDB 1000",
            "income": "Uso: /income <valor> <descrição>\nExemplo: /income 5000.00 Salário",
            "addinvestment": "Uso: /addinvestment <nome> <tipo> <valor> [data]\nExemplos:\n  /addinvestment \"reserva de emergencia\" CDB 84203.72\n  /addinvestment \"reserva de emergencia\" CDB 84203,72\n  /addinvestment Bitcoin Crypto 1000.00 2024-01-15\nA data é opcional (padrão: hoje). Use aspas para nomes com espaços.",
            "updateinvestment": "Uso: /updateinvestment <id ou nome> <valor_atual>\nExemplo: /updateinvestment 1 1200.00",
            "addobjective": "Uso: /addobjective <título>\nExemplo: /addobjective \"Correr uma maratona\"",
            "addkr": "Uso: /addkr <objetivo> <título> [meta]\nExemplo: /addkr 1 \"Metas planilha\" 42",
            "addaction": "Uso: /addaction <resultado-chave> <descrição>\nExemplo: /addaction 1 \"Treinar musculação 4x por semana\"",
            "updateprogress": "Uso: /updateprogress <ação> <progresso>\nExemplo: /updateprogress 1 \"2/52\"",
            "okr": "Uso: /okr <objetivo>\nExemplo: /okr 1",
            "addhabit": "Uso: /addhabit <nome> <frequência>\nExemplo: /addhabit treino \"4x por semana\"",
            "habit": "Uso: /habit <nome> [valor] [data]\nExemplo: /habit treino\nExemplo: /habit agua 2L\nExemplo: /habit treino 2024-01-15",
            "habitstats": "Uso: /habitstats <nome>\nExemplo: /habitstats treino",
            "linkhabit": "Uso: /linkhabit <hábito> <ação>\nExemplo: /linkhabit treino 1",
            "generic": "Uso: /<verbo> <entidade> <detalhes>\nVerbos: adicionar, listar, atualizar, editar, mostrar, ver, deletar, vincular\nEntidades: despesa, receita, investimento, aporte, hábito, objetivo, kr, ação\nExemplo: /delete kr peso",
        },
        "help": {
            "text": (
                "📚 Comandos do Tally:\n\n"
                "💰 Despesas:\n  /add <valor> <descrição>\n  /report - relatório mensal\n  /categories - despesas por categoria\n  /reportcsv - CSV do mês\n\n"
                "💵 Receitas:\n  /income <valor> <descrição>\n  /incomes - receitas do mês\n\n"
                "📈 Investimentos:\n  /investments\n  /addinvestment <nome> <tipo> <valor> [data]\n  /updateinvestment <id> <valor>\n  /add aporte <investimento> <valor> [data]\n\n"
                "🎯 OKRs:\n  /okrs\n  /okr <objetivo>\n  /addobjective <título>\n  /addkr <objetivo> <título> [meta]\n  /addaction <kr> <descrição>\n  /updateprogress <ação> <progresso>\n\n"
                "🏋️ Hábitos:\n  /habits\n  /addhabit <nome> <frequência>\n  /habit <nome> [valor] [data]\n  /habit review\n  /habitstats <nome>\n  /habitprogress\n  /linkhabit <hábito> <ação>\n\n"
                "🧭 Genéricos: /list, /show, /view, /update, /edit, /delete, /link <entidade> ...\n\n"
                "⚙️ /language <en|pt>, /refer, /help"
            ),
        },
    },
}

# Keyword shown in "use /list <alias>" hints.
LIST_ALIASES: dict[EntityType, str] = {
    EntityType.EXPENSE: "expense",
    EntityType.INCOME: "income",
    EntityType.INVESTMENT: "investment",
    EntityType.CONTRIBUTION: "contribution",
    EntityType.HABIT: "habit",
    EntityType.OBJECTIVE: "okr",
    EntityType.KEY_RESULT: "okr",
    EntityType.ACTION: "okr",
}


def t(language: Language, key: str, **kwargs) -> str:
    """Translated text for ``key`` formatted with ``kwargs``."""
    section, _, name = key.partition(".")
    text = TRANSLATIONS[language].get(section, {}).get(name)
    if text is None:
        text = TRANSLATIONS[Language.PT].get(section, {}).get(name, key)
    return text.format(**kwargs) if kwargs else text


def entity_name(entity_type: EntityType, language: Language) -> str:
    return t(language, f"entities.{entity_type.value}")
