"""
牌组(Deck)类单元测试
测试建牌、洗牌、排序、发牌等功能
"""

import random
from collections import Counter

import pytest

from card_deck import Card, Deck, DeckConfig, RANK_LABELS, find_suit


class TestDeckConstruction:
    """牌组创建测试"""

    def test_deck_has_52_unique_cards(self, seeded_deck):
        """测试牌组包含52张不重复的牌"""
        cards = seeded_deck.cards
        assert len(cards) == 52
        assert len(seeded_deck) == 52
        assert seeded_deck.cards_remaining == 52
        assert not seeded_deck.is_empty

        pairs = {(c.value, c.suit.value) for c in cards}
        assert len(pairs) == 52
        assert sorted(c.id for c in cards) == list(range(52))

    def test_rank_matches_value(self, seeded_deck):
        """测试rank与点数标签一致"""
        for card in seeded_deck.cards:
            assert card.rank == RANK_LABELS.index(card.value) + 1

    def test_unshuffled_catalog_order(self, ordered_deck):
        """测试不洗牌时保持目录顺序"""
        cards = ordered_deck.cards
        assert [c.id for c in cards] == list(range(52))
        assert str(cards[0]) == "2S"
        assert str(cards[12]) == "AS"
        assert str(cards[13]) == "2H"
        assert str(cards[26]) == "2D"
        assert str(cards[51]) == "AC"
        assert [c.suit.value for c in cards[::13]] == ["S", "H", "D", "C"]

    def test_pre_shuffle_reorders(self):
        """测试默认洗牌后顺序改变但牌不变"""
        shuffled = Deck(rng=random.Random(7)).cards
        ordered = Deck(pre_shuffle=False).cards
        assert shuffled != ordered
        assert Counter(shuffled) == Counter(ordered)

    def test_seed_reproducibility(self):
        """测试相同种子得到相同顺序"""
        deck1 = Deck(rng=random.Random(123))
        deck2 = Deck(rng=random.Random(123))
        assert deck1.cards == deck2.cards

        deck3 = Deck(rng=random.Random(456))
        assert deck1.cards != deck3.cards

    def test_from_config(self):
        """测试根据配置创建牌组"""
        deck = Deck.from_config(DeckConfig(pre_shuffle=False))
        assert deck.cards == Deck(pre_shuffle=False).cards

        seeded1 = Deck.from_config(DeckConfig(seed=99))
        seeded2 = Deck.from_config(DeckConfig(seed=99))
        assert seeded1.cards == seeded2.cards

    def test_decks_are_independent(self):
        """测试不同牌组互不影响"""
        deck1 = Deck(pre_shuffle=False)
        deck2 = Deck(pre_shuffle=False)
        deck1.get_cards(10)
        assert len(deck1) == 42
        assert len(deck2) == 52
        assert [c.id for c in deck2.cards] == list(range(52))


class TestShuffle:
    """洗牌测试"""

    def test_shuffle_is_permutation(self, ordered_deck):
        """测试洗牌只改变顺序"""
        before = ordered_deck.cards
        ordered_deck.shuffle()
        after = ordered_deck.cards
        assert len(after) == 52
        assert Counter(before) == Counter(after)

    def test_shuffle_after_draw(self, seeded_deck):
        """测试发牌后洗牌只打乱剩余的牌"""
        drawn = seeded_deck.get_cards(10)
        seeded_deck.shuffle()
        remaining = seeded_deck.cards
        assert len(remaining) == 42
        assert not set(drawn) & set(remaining)


class TestSort:
    """排序测试"""

    def test_sort_descending_rank(self, ordered_deck, make_card):
        """测试按rank从大到小排序"""
        cards = [
            make_card(0, "4", "S"),   # rank 3
            make_card(1, "2", "H"),   # rank 1
            make_card(2, "A", "D"),   # rank 13
            make_card(3, "8", "C"),   # rank 7
        ]
        result = ordered_deck.sort(cards)
        assert [c.rank for c in result] == [13, 7, 3, 1]

    def test_sort_is_stable(self, ordered_deck, make_card):
        """测试rank相同的牌保持原有顺序"""
        cards = [
            make_card(0, "K", "C"),
            make_card(1, "2", "S"),
            make_card(2, "K", "S"),
            make_card(3, "K", "H"),
        ]
        result = ordered_deck.sort(cards)
        assert [c.id for c in result] == [0, 2, 3, 1]

    def test_sort_list_in_place(self, ordered_deck, make_card):
        """测试list参数原地排序"""
        cards = [make_card(0, "2", "S"), make_card(1, "A", "S")]
        result = ordered_deck.sort(cards)
        assert result is cards
        assert cards[0].value == "A"

    def test_sort_tuple_returns_new_list(self, ordered_deck, make_card):
        """测试非list序列返回新列表"""
        cards = (make_card(0, "2", "S"), make_card(1, "A", "S"))
        result = ordered_deck.sort(cards)
        assert isinstance(result, list)
        assert [c.value for c in result] == ["A", "2"]
        assert cards[0].value == "2"

    def test_sort_does_not_touch_deck(self, ordered_deck):
        """测试排序不修改牌组本身"""
        before = ordered_deck.cards
        ordered_deck.sort(ordered_deck.cards)
        assert ordered_deck.cards == before

    def test_sort_empty(self, ordered_deck):
        assert ordered_deck.sort([]) == []


class TestGetCards:
    """发牌测试"""

    def test_draw_from_front(self, ordered_deck):
        """测试从牌组前端按顺序发牌"""
        cards = ordered_deck.get_cards(3)
        assert [c.id for c in cards] == [0, 1, 2]
        assert len(ordered_deck) == 49
        assert ordered_deck.peek_top().id == 3

    def test_boundary_half_deck(self, ordered_deck):
        """测试发一半的牌被拒绝"""
        assert ordered_deck.get_cards(26) == []
        assert len(ordered_deck) == 52

    def test_boundary_just_below_half(self, ordered_deck):
        """测试发25张成功"""
        cards = ordered_deck.get_cards(25)
        assert len(cards) == 25
        assert len(ordered_deck) == 27

    @pytest.mark.parametrize("amount", [0, -1, -52, 52, 53, 100])
    def test_invalid_amounts_are_noop(self, ordered_deck, amount):
        """测试无效数量不修改牌组"""
        before = ordered_deck.cards
        assert ordered_deck.get_cards(amount) == []
        assert ordered_deck.cards == before

    def test_successive_draws_shrink_deck(self, ordered_deck):
        """测试连续发牌时的剩余数量条件"""
        assert len(ordered_deck.get_cards(25)) == 25   # 27 left
        assert ordered_deck.get_cards(14) == []        # 14 < 13 fails
        assert len(ordered_deck.get_cards(13)) == 13   # 14 left
        assert len(ordered_deck.get_cards(6)) == 6     # 8 left
        assert ordered_deck.get_cards(4) == []
        assert len(ordered_deck.get_cards(3)) == 3     # 5 left
        assert len(ordered_deck.get_cards(2)) == 2     # 3 left
        assert len(ordered_deck.get_cards(1)) == 1     # 2 left
        assert ordered_deck.get_cards(1) == []
        assert len(ordered_deck) == 2

    def test_drawn_cards_never_return(self, ordered_deck):
        """测试发出的牌不会重新出现"""
        drawn = []
        while True:
            cards = ordered_deck.get_cards(1)
            if not cards:
                break
            drawn.extend(cards)
        assert len({c.id for c in drawn}) == len(drawn)
        assert not {c.id for c in drawn} & {c.id for c in ordered_deck.cards}
        assert len(drawn) + len(ordered_deck) == 52


class TestInspection:
    """查看功能和字符串表示测试"""

    def test_peek_top(self, ordered_deck):
        """测试查看顶部牌不发出"""
        top = ordered_deck.peek_top()
        assert top == Card(0, "2", 1, find_suit("S"))
        assert len(ordered_deck) == 52

    def test_cards_is_copy(self, ordered_deck):
        """测试cards返回副本"""
        cards = ordered_deck.cards
        cards.clear()
        assert len(ordered_deck) == 52

    def test_string_representations(self, ordered_deck):
        """测试字符串表示"""
        assert str(ordered_deck) == "Deck(52 cards remaining)"
        assert repr(ordered_deck) == "Deck(cards_remaining=52)"
        ordered_deck.get_cards(10)
        assert repr(ordered_deck) == "Deck(cards_remaining=42)"


class TestStaticSurface:
    """Deck类上的目录数据和静态方法测试"""

    def test_catalog_on_class(self):
        assert Deck.CARDS[-1] == "A"
        assert Deck.CARDS_TEXT["Q"] == "Queen"
        assert [s.value for s in Deck.SUITS] == ["S", "H", "D", "C"]
        assert Deck.SUITS_TEXT["C"] == "Clubs"
        assert Deck.BLANK_CARD_UTF == "★"

    def test_static_helpers(self, make_card):
        card = make_card(23, "A", "S")
        tokens = Deck.stringify([card])
        assert tokens == ["23#AS"]
        assert Deck.parse(tokens) == [card]
        assert Deck.validate(card)
        assert Deck.get_card_text(card) == "Ace"
        assert Deck.get_suit_text(card) == "Spades"
        assert Deck.get_card_description(card) == "Ace of Spades"
