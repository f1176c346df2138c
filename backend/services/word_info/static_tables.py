# -*- coding: utf-8 -*-
"""
内置翻译与例句表 - WordCoach V1.0
在线服务全部不可用时使用
"""

from typing import Dict, List

from models.word_info_models import PhrasePair


STATIC_TRANSLATIONS: Dict[str, List[str]] = {
    "hello": ["olá", "oi"],
    "welcome": ["bem-vindo", "boas-vindas"],
    "house": ["casa", "moradia"],
    "home": ["lar", "casa"],
    "water": ["água"],
    "love": ["amor", "amar"],
    "time": ["tempo", "hora", "vez"],
    "day": ["dia"],
    "friend": ["amigo", "amiga"],
    "book": ["livro", "reservar"],
    "food": ["comida", "alimento"],
    "work": ["trabalho", "trabalhar"],
    "good": ["bom", "boa"],
    "world": ["mundo"],
    "learn": ["aprender"],
    "word": ["palavra"],
    "school": ["escola"],
    "family": ["família"],
}

STATIC_PHRASES: Dict[str, List[Dict[str, str]]] = {
    "hello": [
        {"english": "Hello, how are you?", "portuguese": "Olá, como você está?"},
        {"english": "She said hello to everyone.", "portuguese": "Ela disse olá para todos."},
    ],
    "welcome": [
        {"english": "Welcome to our home.", "portuguese": "Bem-vindo à nossa casa."},
        {"english": "You are always welcome here.", "portuguese": "Você é sempre bem-vindo aqui."},
    ],
    "house": [
        {"english": "This is my house.", "portuguese": "Esta é minha casa."},
        {"english": "The house is very big.", "portuguese": "A casa é muito grande."},
    ],
    "water": [
        {"english": "Can I have a glass of water?", "portuguese": "Posso tomar um copo de água?"},
        {"english": "The water is cold.", "portuguese": "A água está fria."},
    ],
    "love": [
        {"english": "I love my family.", "portuguese": "Eu amo minha família."},
        {"english": "Love is all you need.", "portuguese": "Amor é tudo que você precisa."},
    ],
    "time": [
        {"english": "What time is it?", "portuguese": "Que horas são?"},
        {"english": "We don't have much time.", "portuguese": "Não temos muito tempo."},
    ],
    "friend": [
        {"english": "He is my best friend.", "portuguese": "Ele é meu melhor amigo."},
        {"english": "A friend in need is a friend indeed.", "portuguese": "É na necessidade que se conhece o amigo."},
    ],
    "book": [
        {"english": "I am reading a good book.", "portuguese": "Estou lendo um bom livro."},
        {"english": "Please book a table for two.", "portuguese": "Por favor, reserve uma mesa para dois."},
    ],
    "work": [
        {"english": "I go to work by bus.", "portuguese": "Eu vou para o trabalho de ônibus."},
        {"english": "This plan will work.", "portuguese": "Este plano vai funcionar."},
    ],
    "good": [
        {"english": "Have a good day!", "portuguese": "Tenha um bom dia!"},
        {"english": "This is a good idea.", "portuguese": "Esta é uma boa ideia."},
    ],
}


def static_translation(word: str) -> List[str]:
    """内置翻译，未收录的单词返回模板占位"""
    return STATIC_TRANSLATIONS.get(word) or [f"{word} (tradução indisponível)"]


def static_phrases(word: str) -> List[PhrasePair]:
    """内置例句，未收录的单词返回模板例句"""
    rows = STATIC_PHRASES.get(word) or [
        {
            "english": f"The word \"{word}\" is used in this sentence.",
            "portuguese": f"A palavra \"{word}\" é usada nesta frase.",
        }
    ]
    return [PhrasePair(**row) for row in rows]
