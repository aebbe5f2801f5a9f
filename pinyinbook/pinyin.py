"""Pinyin lookup for a small set of common Chinese characters."""

from __future__ import annotations

import string

OTHER = "#"

_SYLLABLES = {
    "a": "啊阿",
    "ba": "八吧爸",
    "bai": "白百",
    "ban": "班办",
    "bao": "包宝",
    "bei": "北",
    "ben": "本",
    "bi": "比",
    "bian": "边",
    "biao": "表",
    "bie": "别",
    "bin": "宾",
    "bing": "病",
    "bu": "不",
    "chang": "长",
    "chen": "陈",
    "cheng": "成程",
    "chi": "吃",
    "chu": "出",
    "da": "大",
    "de": "的",
    "dian": "电",
    "dong": "东",
    "dou": "都",
    "duo": "多",
    "fa": "发法",
    "fan": "反",
    "fang": "放",
    "fei": "飞",
    "fen": "分",
    "feng": "风",
    "gao": "高",
    "ge": "个",
    "gei": "给",
    "gong": "公工",
    "guan": "关",
    "guang": "光",
    "guo": "国过",
    "hao": "好",
    "he": "和",
    "hei": "黑",
    "hen": "很",
    "hong": "红",
    "hua": "花话",
    "huan": "欢",
    "huang": "黄",
    "hui": "回会",
    "jia": "家",
    "jian": "见",
    "jiang": "江",
    "jiao": "叫",
    "jin": "今",
    "jing": "京",
    "jiu": "九",
    "kai": "开",
    "kan": "看",
    "kou": "口",
    "lai": "来",
    "lao": "老",
    "le": "了",
    "li": "李",
    "lin": "林",
    "liu": "刘",
    "ma": "马",
    "mao": "毛",
    "mei": "每",
    "men": "门",
    "ming": "明名",
    "ni": "你",
    "nian": "年",
    "niu": "牛",
    "nv": "女",
    "peng": "朋",
    "qi": "七",
    "qian": "前钱",
    "qing": "青",
    "qiu": "秋",
    "qu": "去",
    "ren": "人",
    "ri": "日",
    "san": "三",
    "shan": "山",
    "shang": "上",
    "shei": "谁",
    "shi": "十时是",
    "shu": "书",
    "shui": "水",
    "sun": "孙",
    "ta": "他",
    "tian": "天",
    "ting": "听",
    "wang": "王",
    "wo": "我",
    "wu": "无五",
    "xi": "西",
    "xia": "下",
    "xian": "先",
    "xiang": "想",
    "xiao": "小",
    "xie": "谢",
    "xin": "新",
    "xing": "姓",
    "xue": "学",
    "yang": "杨",
    "yi": "一已",
    "you": "有",
    "yue": "月",
    "zhang": "张",
    "zhao": "赵",
    "zhong": "中",
    "zhou": "周",
    "zhu": "朱",
}


def _build_map() -> dict[str, str]:
    table = {ch: syllable for syllable, chars in _SYLLABLES.items() for ch in chars}
    table.update(dict.fromkeys("&@#$%", ""))
    table.update({ch: ch.lower() for ch in string.ascii_uppercase})
    table.update({ch: ch for ch in string.ascii_lowercase})
    return table


PINYIN_MAP: dict[str, str] = _build_map()


def _upper_char(ch: str) -> str:
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def get_full_pinyin(text: str) -> str:
    """Spell out text in pinyin; unknown letters and digits pass through lower-cased,
    anything else becomes a space."""
    parts = []
    for ch in text:
        if ch in PINYIN_MAP:
            parts.append(PINYIN_MAP[ch])
        elif ch.isalnum():
            parts.append(ch.lower())
        else:
            parts.append(" ")
    return "".join(parts)


def get_initial(text: str) -> str:
    """The upper-case index letter for text, or '#' when it has none."""
    if not text:
        return OTHER
    first = text[0]
    pinyin = PINYIN_MAP.get(first, "")
    if pinyin:
        return _upper_char(pinyin[0])
    if first.isalpha():
        return _upper_char(first)
    return OTHER