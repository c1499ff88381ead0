import json
import re

from onchain_banks.catalog import ChainInfo
from onchain_banks.compare import compare_banks
from onchain_banks.index import build_index
from onchain_banks.models import normalize_cards
from onchain_banks.render import (
    bank_faqs,
    overview_sentences,
    render_bank,
    render_chain,
    render_comparison,
    render_home,
    render_llms,
    render_robots,
    render_sitemap,
)


def _json_ld(html):
    blocks = re.findall(r'<script type="application/ld\+json">(.*?)</script>', html, re.S)
    return [json.loads(block) for block in blocks]


def test_overview_for_non_custodial_bank(make_bank):
    bank = make_bank(
        "Gnosis Pay",
        custody="Non-Custodial",
        chain="Gnosis",
        network="Visa",
        cashback="5%",
        cashbackToken="GNO",
        annualFee="$0",
        features=["Safe account", "IBAN"],
        regions=["europe"],
    )
    first, second, third = overview_sentences(bank)
    assert first == (
        "Gnosis Pay is a non-custodial onchain banking product operating on Gnosis. "
        "It offers a Visa card with 5% cashback paid in GNO."
    )
    assert second == (
        "Key features include Safe account, IBAN. "
        "The card has no annual fee, making it accessible to all users."
    )
    assert third == (
        "Gnosis Pay is available in 🇪🇺 Europe, supporting Visa payments at millions of "
        "merchants worldwide."
    )


def test_overview_omits_token_clause_for_unknown_or_not_applicable(make_bank):
    assert overview_sentences(make_bank("A", cashback="1%"))[0].endswith("with 1% cashback.")
    bank = make_bank("B", cashback="1%", cashbackToken="N/A", custody="Hybrid")
    first = overview_sentences(bank)[0]
    assert first.startswith("B is an onchain banking product")
    assert first.endswith("with 1% cashback.")


def test_overview_defaults_to_global_availability(make_bank):
    bank = make_bank("Roamer", annualFee="$99")
    _, second, third = overview_sentences(bank)
    assert second == "The annual fee is $99."
    assert third.startswith("Roamer is available globally,")


def test_bank_faqs(make_bank):
    bank = make_bank("Vault", custody="Custodial", cashback="2%", cashbackToken="N/A", chain="Base")
    faqs = bank_faqs(bank)
    assert [faq.question for faq in faqs] == [
        "Is Vault self-custody?",
        "What cashback does Vault offer?",
        "What blockchain does Vault use?",
        "Is there an annual fee for Vault?",
    ]
    assert faqs[0].answer.startswith("Vault uses a custodial model")
    assert faqs[1].answer == "Vault offers 2% cashback paid in N/A."
    assert faqs[2].answer == "Vault operates on Base."
    assert faqs[3].answer == "The annual fee for Vault is TBD."


def test_render_bank_profile(sample_cards, config):
    index = build_index(normalize_cards(sample_cards))
    bank = index.get("etherfi-cash")
    html = render_bank(bank, index, config)

    assert "<title>Ether.fi Cash — Onchain Bank Profile | OnchainBanks.io</title>" in html
    assert '<link rel="canonical" href="https://onchainbanks.io/bank/etherfi-cash/">' in html
    assert f'<td class="px-4 py-3 text-lime-400 font-semibold">{bank.cashback}</td>' in html
    assert "🔐 Non-Custodial" in html
    assert "✦ Borrow against staked ETH" in html
    assert 'href="https://spendbase.cards/card/etherfi-cash/"' in html
    # Phantom Card shares the cryptoNative category.
    assert 'href="/bank/phantom-card/"' in html
    assert 'href="/bank/nexo/"' not in html

    faq, product = _json_ld(html)
    assert faq["@type"] == "FAQPage"
    assert len(faq["mainEntity"]) == 4
    assert product["@type"] == "FinancialProduct"
    assert product["url"] == "https://onchainbanks.io/bank/etherfi-cash/"


def test_render_bank_without_features_or_related(config, make_bank):
    lonely = make_bank("Lonely", chain="Tron", category="neobank")
    index = build_index([lonely, make_bank("Other", chain="Base", category="exchange")])
    html = render_bank(lonely, index, config)
    assert 'id="features"' not in html
    assert 'id="related"' not in html
    assert "Neobank" in html


def test_render_bank_escapes_markup(config, make_bank):
    bank = make_bank("Tom & Jerry <Card>")
    html = render_bank(bank, build_index([bank]), config)
    assert "Tom &amp; Jerry &lt;Card&gt;" in html
    assert "<Card>" not in html


def test_render_comparison(config, make_bank):
    a = make_bank("Alpha", cashback="5%", annualFee="$0", custody="Non-Custodial")
    b = make_bank("Beta", cashback="2%", annualFee="$50", custody="Custodial")
    html = render_comparison(compare_banks(a, b), config)

    assert "Alpha vs Beta — Which Onchain Bank is Better?" in html
    assert "🏆 Verdict: Alpha" in html
    assert '<td class="px-4 py-3 text-lime-400 font-bold">5%</td>' in html
    assert '<td class="px-4 py-3 text-gray-500">2%</td>' in html
    assert '<link rel="canonical" href="https://onchainbanks.io/compare/alpha-vs-beta/">' in html
    assert "Alpha offers 5% vs Beta&#39;s 2%." in html
    (faq,) = _json_ld(html)
    assert faq["mainEntity"][0]["acceptedAnswer"]["text"] == "Alpha offers 5% vs Beta's 2%."


def test_render_comparison_tie(config, make_bank):
    html = render_comparison(compare_banks(make_bank("A"), make_bank("B")), config)
    assert "🏆 Verdict: Both are strong choices" in html
    assert "Both cards are competitive" in html


def test_render_chain(config, make_bank):
    chain = ChainInfo("tron", "Tron", "Tron is a chain.")
    members = [make_bank("One", chain="Tron"), make_bank("Two", chain="Tron")]
    html = render_chain(chain, members, config)
    assert "Tron is a chain." in html
    assert "2 cards on Tron" in html
    assert 'href="/bank/one/"' in html and 'href="/bank/two/"' in html


def test_render_chain_single_member(config, make_bank):
    chain = ChainInfo("tron", "Tron", "Tron is a chain.")
    assert "1 card on Tron" in render_chain(chain, [make_bank("One")], config)


def test_render_home(sample_cards, config):
    index = build_index(normalize_cards(sample_cards))
    html = render_home(index, config, featured=["nexo", "missing", "gnosis-pay"])

    featured = html.split('id="featured"')[1].split('id="all-banks"')[0]
    assert featured.index("/bank/nexo/") < featured.index("/bank/gnosis-pay/")
    assert "/bank/missing/" not in html
    assert "All 5 Onchain Banks" in html
    assert '<p class="text-3xl font-bold text-white">40%</p>' in html

    chains = html.split('id="chains"')[1]
    assert 'href="/chain/multi-chain/"' in chains
    assert 'href="/chain/ethereum/"' not in chains
    assert "© 2025 OnchainBanks.io · Data updated 2025-03-14" in html


def test_text_manifests(sample_cards, config):
    index = build_index(normalize_cards(sample_cards))
    llms = render_llms(index, config)
    assert "- 5+ onchain banking products tracked" in llms
    assert "Custody analysis: 40% non-custodial, 60% custodial" in llms
    assert llms.rstrip().endswith("visit spendbase.cards")

    robots = render_robots(config)
    assert robots == "User-agent: *\nAllow: /\n\nSitemap: https://onchainbanks.io/sitemap.xml\n"


def test_sitemap_lists_each_url_with_build_date(config):
    xml = render_sitemap(["https://onchainbanks.io/", "https://onchainbanks.io/bank/a/"], config)
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert xml.count("<lastmod>2025-03-14</lastmod>") == 2
    assert "<url><loc>https://onchainbanks.io/bank/a/</loc>" in xml
