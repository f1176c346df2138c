# -*- coding: utf-8 -*-
"""
IPA词典 - WordCoach V1.0
提供随机单词、IPA音标以及面向葡语使用者的近似读音

默认使用 CMU Pronouncing Dictionary（cmudict包，ARPAbet转换为IPA）
也可以指定 ipa-dict 格式的词典文件: 每行 "单词<TAB>/音标/"，多个音标用逗号分隔
"""

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import cmudict

logger = logging.getLogger(__name__)

# ARPAbet -> IPA（元音按重音区分弱读形式）
ARPABET_TO_IPA = {
    "AA": "ɑ", "AE": "æ", "AH": "ʌ", "AO": "ɔ", "AW": "aʊ", "AY": "aɪ",
    "EH": "ɛ", "ER": "ɝ", "EY": "eɪ", "IH": "ɪ", "IY": "i", "OW": "oʊ",
    "OY": "ɔɪ", "UH": "ʊ", "UW": "u",
    "B": "b", "CH": "tʃ", "D": "d", "DH": "ð", "F": "f", "G": "ɡ",
    "HH": "h", "JH": "dʒ", "K": "k", "L": "ɫ", "M": "m", "N": "n",
    "NG": "ŋ", "P": "p", "R": "ɹ", "S": "s", "SH": "ʃ", "T": "t",
    "TH": "θ", "V": "v", "W": "w", "Y": "j", "Z": "z", "ZH": "ʒ",
}
UNSTRESSED_VOWELS = {"AH": "ə", "ER": "ɚ"}
STRESS_MARKS = {"1": "ˈ", "2": "ˌ"}

# 元音之间可以整体作为下一个音节开头的辅音组合
TWO_CONSONANT_ONSETS = {
    ("P", "R"), ("B", "R"), ("T", "R"), ("D", "R"), ("K", "R"), ("G", "R"),
    ("F", "R"), ("TH", "R"), ("SH", "R"),
    ("P", "L"), ("B", "L"), ("K", "L"), ("G", "L"), ("F", "L"), ("S", "L"),
    ("S", "P"), ("S", "T"), ("S", "K"), ("S", "M"), ("S", "N"),
    ("K", "W"), ("T", "W"), ("D", "W"), ("S", "W"), ("G", "W"),
    ("P", "Y"), ("B", "Y"), ("K", "Y"), ("F", "Y"), ("M", "Y"), ("V", "Y"), ("HH", "Y"),
}


def _onset_start(phones: List[str], vowel_index: int, previous_vowel: Optional[int]) -> int:
    """重音符号插入位置：当前音节的起始辅音之前"""
    if previous_vowel is None:
        return 0
    cluster = phones[previous_vowel + 1:vowel_index]
    if len(cluster) >= 2 and tuple(cluster[-2:]) in TWO_CONSONANT_ONSETS:
        return vowel_index - 2
    return vowel_index - min(len(cluster), 1)


def arpabet_to_ipa(phones: List[str]) -> str:
    """
    将CMU词典的ARPAbet音素转换为IPA音标

    Args:
        phones: ARPAbet音素，元音带重音数字，例如 ["HH", "AW1", "S"]

    Returns:
        str: IPA音标，例如 /ˈhaʊs/
    """
    symbols = []
    marks = {}
    previous_vowel = None
    for index, phone in enumerate(phones):
        base = phone.rstrip("012")
        stress = phone[len(base):]
        if stress:
            if stress == "0" and base in UNSTRESSED_VOWELS:
                symbols.append(UNSTRESSED_VOWELS[base])
            else:
                symbols.append(ARPABET_TO_IPA.get(base, base.lower()))
            if stress in STRESS_MARKS:
                marks[_onset_start(phones, index, previous_vowel)] = STRESS_MARKS[stress]
            previous_vowel = index
        else:
            symbols.append(ARPABET_TO_IPA.get(base, base.lower()))

    return "/" + "".join(marks.get(i, "") + s for i, s in enumerate(symbols)) + "/"


# IPA符号 -> 葡语拼读，按长度优先匹配
IPA_TO_PT = {
    "tʃ": "tch", "dʒ": "dj",
    "aɪ": "ai", "aʊ": "au", "ɔɪ": "ói", "eɪ": "ei", "oʊ": "ôu",
    "ɝ": "âr", "ɚ": "âr",
    "θ": "th", "ð": "dh", "ʃ": "ch", "ʒ": "j", "ŋ": "ng",
    "h": "r", "ɹ": "r", "j": "i", "w": "u", "ɫ": "l", "ɡ": "g",
    "æ": "é", "ɑ": "á", "ɔ": "ó", "ə": "â", "ʌ": "â", "ɛ": "é", "e": "ê",
    "ɪ": "i", "ʊ": "u", "o": "ô",
}
_IGNORED = set("/ˈˌː.")
_MAX_SYMBOL = max(len(k) for k in IPA_TO_PT)


def ipa_to_pronounce(ipa: str) -> str:
    """
    将IPA音标转换为葡语近似读音

    Args:
        ipa: IPA音标，例如 /ˈhaʊs/

    Returns:
        str: 近似读音，例如 raus
    """
    result = []
    i = 0
    while i < len(ipa):
        if ipa[i] in _IGNORED:
            i += 1
            continue
        for size in range(_MAX_SYMBOL, 0, -1):
            symbol = ipa[i:i + size]
            if symbol in IPA_TO_PT:
                result.append(IPA_TO_PT[symbol])
                i += size
                break
        else:
            result.append(ipa[i])
            i += 1
    return "".join(result)


class IpaDictionary:
    """IPA词典"""

    def __init__(self, dict_file: Optional[Path] = None, rng: Optional[random.Random] = None):
        """
        初始化词典（首次使用时加载）

        Args:
            dict_file: ipa-dict 格式的词典文件路径，None表示使用CMU词典
            rng: 随机数生成器（测试时可注入）
        """
        self.dict_file = Path(dict_file) if dict_file else None
        self._rng = rng or random.Random()
        self._entries: Optional[Dict[str, str]] = None
        self._words: List[str] = []

    def _load_file(self) -> Dict[str, str]:
        """加载 ipa-dict 格式的词典文件"""
        entries = {}
        with open(self.dict_file, "r", encoding="utf-8") as f:
            for line in f:
                word, sep, ipa = line.strip().partition("\t")
                if not sep or not word or not ipa:
                    continue
                # 只保留第一个音标
                entries[word.lower()] = ipa.split(",")[0].strip()
        return entries

    def _load_cmudict(self) -> Dict[str, str]:
        """加载CMU词典，只保留纯字母单词的第一个发音"""
        return {
            word: arpabet_to_ipa(pronunciations[0])
            for word, pronunciations in cmudict.dict().items()
            if word.isalpha() and pronunciations
        }

    def _load(self) -> Dict[str, str]:
        """加载词典"""
        if self._entries is not None:
            return self._entries

        entries = self._load_file() if self.dict_file else self._load_cmudict()
        logger.info(f"📚 IPA词典加载完成: {len(entries)} 个单词 ({self.dict_file or 'cmudict'})")
        self._entries = entries
        self._words = list(entries)
        return entries

    def generate_random_word(self) -> str:
        """随机返回词典中的一个单词"""
        self._load()
        if not self._words:
            raise LookupError(f"IPA词典为空: {self.dict_file or 'cmudict'}")
        return self._rng.choice(self._words)

    def get_details_of_transcription(self, word: str) -> Optional[Tuple[str, str]]:
        """
        查询单词的音标和近似读音

        Args:
            word: 英文单词

        Returns:
            Optional[Tuple[str, str]]: (IPA音标, 葡语近似读音)，未收录返回None
        """
        ipa = self._load().get(word.lower().strip())
        if ipa is None:
            return None
        return ipa, ipa_to_pronounce(ipa)

    def size(self) -> int:
        return len(self._load())
