"""Shared fixtures."""

import pytest

from hoverdict.core.store import DictionaryStore


ROWS = [
    "word,phonetic,definition,translation,pos,collins,oxford,tag,bnc,frq,exchange,detail,audio",
    "cat,kæt,a small domesticated feline,猫,n.",
    "hello,hə'ləʊ,n. an expression of greeting\\n\"v. call out,int. 喂\\nn. 表示问候,int:95/n:5",
    "world,wɜːld,n. everything that exists anywhere,n. 世界,n:100",
    "hello world,,a classic first program,\"你好世界\",",
    "foo,,,,",
    "bar,bɑː,a counter where drinks are served,n. 酒吧,n:80/v:20",
    "broken,row",
]


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "ecdict.csv"
    path.write_text("\n".join(ROWS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def store(dataset):
    s = DictionaryStore()
    s.initialize(dataset)
    return s
