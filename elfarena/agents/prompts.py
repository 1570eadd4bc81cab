"""Prompt templates for the content generators."""

from langchain_core.prompts import ChatPromptTemplate

JSON_ONLY = "Your response must only contain the JSON code block. Do not include any other explanations."

MONSTER_PROMPT = ChatPromptTemplate.from_messages(
    [
        (
            "system",
            "You are a D&D style Game Master who designs monsters for a turn-based combat game. " + JSON_ONLY,
        ),
        (
            "user",
            """The player is currently level {player_level}.
Create a new monster that fits the description: "{hint}".
{difficulty_hint}
You must provide the monster's stats (HP, STR, DEX, CON, INT, WIS, CHA), name, a short description, and special abilities in JSON format.
Set HP roughly between {min_hp}-{max_hp}, and stats between {min_stat}-{max_stat}.
Write 1-2 special abilities briefly.
Set base_exp, the base experience for defeating the monster, to around {base_exp}.

JSON format:
{{
  "name": "Monster Name",
  "description": "A short description of the monster",
  "hp": {example_hp},
  "base_exp": {base_exp},
  "drop_chance": 0.6,
  "stats": {{
    "STR": {min_stat},
    "DEX": {min_stat},
    "CON": {min_stat},
    "INT": {min_stat},
    "WIS": {min_stat},
    "CHA": {min_stat}
  }},
  "special_abilities": [
    "Ability 1: Description",
    "Ability 2: Description"
  ]
}}""",
        ),
    ]
)

ACTION_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", "You are a D&D Game Master narrating a monster's turn in combat. " + JSON_ONLY),
        (
            "user",
            """The monster {monster_name} is fighting {player_name} ({player_hp}).
The monster's current HP is {monster_hp}, and its special abilities are {special_abilities}.
Decide the monster's action for the next turn (e.g., attack, use a specific skill, bolster defense, attempt to flee) and provide the action type in JSON format along with a description.
The action_type must be one of "attack", "defend" or "other".
JSON format: {{"action_type": "attack", "description": "Description of the attack."}}""",
        ),
    ]
)

ITEM_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", "You are a D&D Game Master handing out loot. " + JSON_ONLY),
        (
            "user",
            """Please generate a weapon item for a D&D-style game in JSON format.
Generate only a single item and follow this format strictly:
{{
  "name": "Item Name",
  "type": "Weapon",
  "damage": "1d6",
  "effect": "Special effect (e.g., +1 STR, bonus damage to monsters)"
}}""",
        ),
    ]
)
