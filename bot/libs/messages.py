from models.transaction import PaymentMethod
from services.errors import InsufficientFunds, KioskError

CURRENCY = "₹"

register_text = '''✅ <b>Registration successful!</b>

🆔<b>Your User ID</b>: <code>{user_id}</code>
👤<b>Name</b>: {name}
☎️<b>Phone</b>: {phone}'''

student_note = "🎓 Student discount: 10% off on all purchases!"

topup_text = '''💳 <b>Wallet topped up</b>

➕<b>Added</b>: {amount} {cur}
🎁<b>Bonus</b>: {bonus} {cur}
💰<b>New Balance</b>: {balance} {cur}'''

pass_text = '''🎫 <b>{label} Pass purchased!</b>

💸<b>Cost</b>: {cost} {cur}
📅<b>Valid for</b>: {days} days
⏳<b>Expires</b>: {expiry}
💰<b>Remaining Balance</b>: {balance} {cur}

<i>No digital payment fees during pass validity!</i>'''

new_purchase_text = '''🔔<b> New Purchase Alert </b> 🔔

User <code>{user_id}</code> bought {liters} L of water.

🌐<b>Base Cost</b>: {base} {cur}
🧩<b>Discount</b>: {discount} {cur}
💳<b>Fee</b>: {fee} {cur}
💰<b>Paid</b>: {amount} {cur} ({method})'''

WAIVER_NOTES = {
    "pass": "🎫 Pass holder - no digital payment fee!",
    "bulk": "📦 Bulk purchase - digital fee waived!",
    "discount": "🎁 Discount covers the digital fee!",
}


def money(v) -> str:
    return f"{v:.2f}"


def error_text(err: KioskError) -> str:
    if isinstance(err, InsufficientFunds):
        return (
            "❌ Insufficient wallet balance!\n"
            f"Required: {money(err.required)} {CURRENCY}, Available: {money(err.available)} {CURRENCY}"
        )
    return f"❌ {err.message}"


def receipt_text(name, receipt) -> str:
    q = receipt.quote
    txn = receipt.transaction
    lines = ["🧾 <b>PURCHASE RECEIPT</b>\n"]
    lines.append(f"👤 User: {name} (ID: {txn.user_id})")
    lines.append(f"💧 Water: {q.liters:g} liters")
    lines.append(f"🌐 Base cost: {money(q.base_cost)} {CURRENCY}")
    if q.discount > 0:
        lines.append(f"🧩 Discount: -{money(q.discount)} {CURRENCY}")
    if q.fee > 0:
        lines.append(f"💳 Digital fee: +{money(q.fee)} {CURRENCY}")
    if q.fee_waiver:
        lines.append(WAIVER_NOTES[q.fee_waiver])
    lines.append(f"💰 <b>Final amount: {money(q.amount)} {CURRENCY}</b>")
    lines.append(f"🏦 Paid by: {txn.payment_method.value}")
    if txn.payment_method is PaymentMethod.DIGITAL:
        lines.append(f"👛 Wallet balance: {money(receipt.wallet_balance)} {CURRENCY}")
    lines.append(f"⭐ Points earned: +{receipt.points_earned} (total {receipt.loyalty_points})")
    return "\n".join(lines)


def profile_text(profile) -> str:
    lines = ["⚔️——— USER PROFILE ———⚔️\n"]
    lines.append(f"👤 Name : {profile.name}")
    lines.append(f"🆔 User ID : {profile.user_id}")
    lines.append(f"☎️ Phone : {profile.phone}")
    lines.append(f"🎓 Student : {'Yes' if profile.is_student else 'No'}")
    lines.append(f"💰 Wallet : {money(profile.wallet_balance)} {CURRENCY}")
    lines.append(f"📈 Total Spent : {money(profile.total_spent)} {CURRENCY}")
    lines.append(f"🧾 Transactions : {profile.transaction_count}")
    lines.append(f"⭐ Loyalty Points : {profile.loyalty_points}")
    if profile.active_pass:
        lines.append(f"🎫 Active Pass : {profile.active_pass} ({profile.pass_days_remaining} days remaining)")
    else:
        lines.append("🎫 Active Pass : None")

    lines.append(f"\n💸 Potential monthly digital fees : {money(profile.potential_monthly_fees)} {CURRENCY}")
    if profile.pass_savings > 0:
        lines.append(f"💡 Tip: a Monthly pass could save you {money(profile.pass_savings)} {CURRENCY}!")
    return "\n".join(lines)


def pricing_text(info) -> str:
    c = info.comparison
    lines = [
        "💧 <b>PRICING & DISCOUNTS</b>\n",
        f"Base price: {money(info.price_per_liter)} {CURRENCY} per liter",
        f"Digital payment fee: {money(info.digital_fee)} {CURRENCY} (when applicable)",
        "\n<b>Ways to avoid digital fees</b>",
        f"1. Weekly Pass ({money(info.weekly_pass_cost)} {CURRENCY}) - no fees for {info.weekly_pass_days} days",
        f"2. Monthly Pass ({money(info.monthly_pass_cost)} {CURRENCY}) - no fees for {info.monthly_pass_days} days",
        f"3. Bulk purchase - buy ≥{info.min_bulk_liters} liters (fee waived)",
        f"4. Student discount - {info.student_rate:.0%} off (may cover fee)",
        f"5. Loyalty discount - spend ≥{money(info.loyalty_threshold)} {CURRENCY} total ({info.loyalty_rate:.0%} off)",
        "\n<b>Bulk discounts</b>",
    ]
    for min_liters, amount in info.bulk_tiers:
        lines.append(f"• ≥{min_liters} L: -{money(amount)} {CURRENCY}")
    lines += [
        "\n<b>Wallet bonus</b>",
        f"• Top-up ≥{money(info.topup_bonus_threshold)} {CURRENCY}: {info.topup_bonus_rate:.0%} bonus credit",
        "\n<b>Loyalty program</b>",
        f"• Earn 1 point per {CURRENCY}1 spent",
        f"• {info.points_per_redemption} points = {money(info.points_redemption_value)} {CURRENCY} off your next purchase",
        f"\n<b>Daily {c['daily_liters']}L for {c['days']} days</b>",
        f"• Cash: {money(c['cash'])} {CURRENCY}",
        f"• Digital (no pass): {money(c['digital_no_pass'])} {CURRENCY}",
        f"• Digital (monthly pass): {money(c['digital_monthly_pass'])} {CURRENCY}",
        f"• Savings with pass: {money(c['pass_savings'])} {CURRENCY}",
    ]
    return "\n".join(lines)


def analytics_text(report) -> str:
    t = report.totals
    lines = [
        "📊 <b>ADMIN ANALYTICS</b>\n",
        f"👥 Total Users: {report.total_users}",
        f"🧾 Total Transactions: {report.total_transactions}",
        f"💵 Cash Transactions: {t.cash_transactions} ({report.cash_share:.1f}%)",
        f"💳 Digital Transactions: {t.digital_transactions} ({report.digital_share:.1f}%)",
        f"📦 Bulk Purchases: {t.bulk_purchases}",
        f"🎫 Pass Holders: {t.pass_holders}",
        "\n<b>Financial summary</b>",
        f"Total Revenue: {money(t.total_revenue)} {CURRENCY}",
        f"Fees Collected: {money(t.total_fees_collected)} {CURRENCY}",
        f"Discounts Given: {money(t.total_discounts_given)} {CURRENCY}",
        f"Net Revenue: {money(report.net_revenue)} {CURRENCY}",
    ]
    if report.recommendations:
        lines.append("\n<b>Recommendations</b>")
        lines += [f"• {tip}" for tip in report.recommendations]
    return "\n".join(lines)
