import logging
import time
from datetime import datetime

import streamlit as st
import streamlit.components.v1 as components
from streamlit_js_eval import get_geolocation, streamlit_js_eval

from noorhub import ai_service, config, quran, zakat
from noorhub.ai_service import BackendError
from noorhub.compass import (
    ORIENTATION_SAMPLE_JS,
    CompassSession,
    OrientationEvent,
    OrientationSource,
    SensorState,
    permission_script,
)
from noorhub.geolocation import LocationRequest, get_timezone, location_label, reverse_geocode
from noorhub.helpers import sanitize_input
from noorhub.i18n import LANGUAGES, prayer_name, t
from noorhub.prayer_times import PRAYER_ORDER, current_and_next_prayer, get_timings, minutes_until
from noorhub.qibla import compute_bearing_and_distance, needle_rotation
from noorhub.quran import QuranServiceError
from noorhub.store import BOOKMARKS_KEY, COMPLETED_AZKAR_KEY, LocalStore, toggle_id
from noorhub.tasbeeh import DHIKRS, TARGETS, TasbeehCounter

config.configure_logging()
log = logging.getLogger("noorhub.app")

# Set page configuration
st.set_page_config(
    page_title="Noor Islamic Hub",
    page_icon="🕌",
    layout="wide"
)

# Apply custom CSS
st.markdown("""
<style>
    .main .block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
    }
    .urdu {
        direction: rtl;
        text-align: right;
        font-family: 'Noto Nastaliq Urdu', 'Noto Naskh Arabic', serif;
        line-height: 2.1;
    }
    .arabic {
        direction: rtl;
        text-align: right;
        font-family: 'Noto Naskh Arabic', 'Amiri', serif;
        font-size: 1.5rem;
        line-height: 2.2;
    }
    .prayer-time {
        padding: 8px;
        border-radius: 5px;
        margin-bottom: 5px;
    }
    .current-prayer {
        background-color: #b3e5fc;
        border-left: 4px solid #0288d1;
    }
    .next-prayer {
        background-color: #e8f5e9;
        border-left: 4px solid #43a047;
    }
</style>
""", unsafe_allow_html=True)

PAGES = ["dashboard", "quran", "hadith", "scholar", "zakat", "qibla", "tasbeeh"]

# Initialize session state
if "store" not in st.session_state:
    store = LocalStore(config.STORE_PATH)
    store.load()
    st.session_state.store = store
if "location_request" not in st.session_state:
    st.session_state.location_request = LocationRequest()
if "messages" not in st.session_state:
    st.session_state.messages = []
if "tasbeeh" not in st.session_state:
    st.session_state.tasbeeh = TasbeehCounter(st.session_state.store)

store = st.session_state.store


def text_block(text, css_class):
    st.markdown(f"<div class='{css_class}'>{sanitize_input(text)}</div>", unsafe_allow_html=True)


def resolve_location():
    """Ask the browser for a position once, falling back after the bounded wait"""
    if "location" in st.session_state:
        return st.session_state.location
    position = get_geolocation()
    resolved = st.session_state.location_request.resolve(position)
    if resolved is not None:
        st.session_state.location = resolved
    return resolved


def place_for(resolved, lang):
    if resolved is None or resolved.is_fallback:
        return None
    cache_key = f"place-{lang}-{resolved.point.latitude}-{resolved.point.longitude}"
    if cache_key not in st.session_state:
        st.session_state[cache_key] = reverse_geocode(resolved.point, lang)
    return st.session_state[cache_key]


def close_compass():
    session = st.session_state.pop("compass", None)
    if session is not None:
        session.close()


# Sidebar
with st.sidebar:
    lang = st.radio(
        "زبان / Language",
        options=list(LANGUAGES),
        format_func=lambda code: "اردو" if code == "ur" else "English",
        horizontal=True,
    )
    st.header(t("app_title", lang))
    page = st.radio(
        t("app_title", lang),
        options=PAGES,
        format_func=lambda key: t(f"nav_{key}", lang),
        label_visibility="collapsed",
    )

# Leaving the Qibla page tears down the heading subscription
if page != "qibla":
    close_compass()

location = resolve_location()
place = place_for(location, lang)

with st.sidebar:
    st.markdown("---")
    st.markdown(f"📍 **{location_label(location, place, lang)}**")


def dashboard_page():
    st.title(t("app_title", lang))

    if location is None:
        st.info(t("detecting_location", lang))
    else:
        with st.spinner(t("prayer_times", lang)):
            timings = get_timings(location.point.latitude, location.point.longitude)
            local_tz = get_timezone(location.point)

        if timings:
            now = datetime.now(local_tz)
            current_prayer, next_prayer = current_and_next_prayer(timings, now)
            st.subheader(t("prayer_times", lang))
            st.caption(f"{now.strftime('%H:%M')} ({local_tz.zone})")
            for prayer in PRAYER_ORDER:
                css = "prayer-time"
                badge = ""
                if prayer == current_prayer:
                    css += " current-prayer"
                    badge = t("current", lang)
                elif prayer == next_prayer:
                    css += " next-prayer"
                    badge = f"{t('next', lang)} · {minutes_until(timings, prayer, now)} {t('minutes_left', lang)}"
                st.markdown(
                    f"<div class='{css}'><strong>{prayer_name(prayer, lang)}:</strong> {timings[prayer]}"
                    f"<span style='float: right;'>{badge}</span></div>",
                    unsafe_allow_html=True,
                )
        else:
            st.error(t("prayer_times_failed", lang))

    daily_key = f"daily-{lang}"
    if daily_key not in st.session_state:
        with st.spinner(t("verse_of_day", lang)):
            st.session_state[daily_key] = ai_service.load_daily_content(lang)
    verse, adhkar = st.session_state[daily_key]

    col1, col2 = st.columns(2)
    with col1:
        st.subheader(t("verse_of_day", lang))
        if verse:
            text_block(str(verse.get("text", "")), "arabic")
            text_block(str(verse.get("translation", "")), "urdu" if lang == "ur" else "")
            st.caption(f"{verse.get('surah', '')} {verse.get('number', '')}")
        else:
            st.warning(t("daily_failed", lang))

    with col2:
        st.subheader(t("daily_adhkar", lang))
        if not adhkar:
            st.warning(t("daily_failed", lang))
        completed = store.get(COMPLETED_AZKAR_KEY, [])
        for dhikr in adhkar:
            dhikr_id = dhikr.get("id")
            done = dhikr_id in completed
            with st.expander(f"{'✅ ' if done else ''}{dhikr.get('arabic', '')}"):
                st.markdown(dhikr.get("translation", ""))
                if dhikr.get("benefit"):
                    st.caption(dhikr["benefit"])
                if st.checkbox(t("completed", lang), value=done, key=f"azkar-{dhikr_id}") != done:
                    toggle_id(store, COMPLETED_AZKAR_KEY, dhikr_id)
                    st.rerun()


def quran_page():
    st.title(t("nav_quran", lang))

    mode = st.radio(" ", [t("surah", lang), t("juz", lang)], horizontal=True, label_visibility="collapsed")
    bookmarks = store.get(BOOKMARKS_KEY, [])

    verses = []
    try:
        if mode == t("surah", lang):
            query = st.text_input(t("search_surah", lang))
            matches = quran.search_surahs(query)
            if not matches:
                return
            surah = st.selectbox(
                t("surah", lang),
                options=matches,
                format_func=lambda s: f"{s.id}. {s.name} ({s.english}) · {s.verses} {t('verses', lang)}",
            )
            st.audio(quran.surah_audio_url(surah.id))
            with st.spinner(surah.name):
                verses = quran.fetch_surah(surah.id, lang)
        else:
            juz = st.selectbox(t("juz", lang), options=list(range(1, quran.JUZ_COUNT + 1)))
            with st.spinner(f"{t('juz', lang)} {juz}"):
                verses = quran.fetch_juz(juz, lang)
    except QuranServiceError as e:
        log.error("Failed to fetch verses: %s", e)
        st.error(t("verses_failed", lang) if mode == t("surah", lang) else t("juz_failed", lang))
        if st.button(t("retry", lang)):
            quran.fetch_surah.cache_clear()
            quran.fetch_juz.cache_clear()
            st.rerun()
        return

    for verse in verses:
        label = f"{verse.surah_name} · {verse.number}" if verse.surah_name else str(verse.number)
        st.markdown(f"**{label}**")
        text_block(verse.text, "arabic")
        text_block(verse.translation, "urdu" if lang == "ur" else "")
        col1, col2 = st.columns([4, 1])
        with col1:
            st.audio(verse.audio)
        with col2:
            marked = verse.global_number in bookmarks
            if st.button(("★ " if marked else "☆ ") + t("bookmark", lang), key=f"bm-{verse.global_number}"):
                toggle_id(store, BOOKMARKS_KEY, verse.global_number)
                st.rerun()
        st.markdown("---")

    if bookmarks:
        with st.sidebar.expander(t("bookmarks", lang)):
            st.write(", ".join(str(b) for b in sorted(bookmarks)))


def hadith_page():
    st.title(t("hadith_search", lang))

    with st.form("hadith-search"):
        topic = st.text_input(t("hadith_topic", lang))
        col1, col2 = st.columns(2)
        with col1:
            source = st.selectbox(
                t("source", lang),
                ai_service.HADITH_SOURCES,
                format_func=lambda s: t("all_books", lang) if s == "all" else s,
            )
        with col2:
            authenticity = st.selectbox(
                t("authenticity", lang),
                ai_service.HADITH_AUTHENTICITIES,
                format_func=lambda s: t("all_status", lang) if s == "all" else s,
            )
        submitted = st.form_submit_button(t("hadith_search", lang))

    if submitted and topic.strip():
        with st.spinner(t("hadith_search", lang)):
            try:
                results = ai_service.search_hadith(topic, lang, source, authenticity)
            except BackendError as e:
                log.error("Search failed: %s", e)
                results = []
        if not results:
            st.error(t("hadith_failed", lang))
        st.session_state.hadith_results = results

    for hadith in st.session_state.get("hadith_results", []):
        with st.container(border=True):
            text_block(hadith.get("text", ""), "urdu" if lang == "ur" else "")
            st.caption(
                f"{t('source', lang)}: {hadith.get('source', '')} · "
                f"{t('narrator', lang)}: {hadith.get('narrator', '')} · "
                f"{t('authenticity', lang)}: {hadith.get('authenticity', '')}"
            )
            links = " | ".join(
                f"[{name}]({ai_service.share_url(platform, hadith, lang)})"
                for platform, name in zip(ai_service.SHARE_PLATFORMS, ("WhatsApp", "Twitter", "Facebook"))
            )
            st.markdown(f"{t('share', lang)}: {links}")


def scholar_page():
    st.title(t("nav_scholar", lang))

    if not st.session_state.messages:
        st.session_state.messages = [{"role": "assistant", "content": t("scholar_greeting", lang)}]

    for message in st.session_state.messages:
        with st.chat_message(message["role"]):
            st.markdown(message["content"])

    query = st.chat_input(t("ask_scholar", lang))
    if query:
        st.session_state.messages.append({"role": "user", "content": query})
        with st.chat_message("user"):
            st.markdown(query)
        with st.chat_message("assistant"):
            with st.spinner("🤔"):
                response = ai_service.get_scholar_response(query, lang)
            st.markdown(response)
        st.session_state.messages.append({"role": "assistant", "content": response})

    if st.button(t("clear_conversation", lang)):
        st.session_state.messages = []
        st.rerun()


def zakat_page():
    st.title(t("zakat_title", lang))

    col1, col2 = st.columns(2)
    with col1:
        values = {
            field: st.number_input(t(field, lang), min_value=0.0, value=0.0, step=1000.0, key=f"zakat-{field}")
            for field in ("cash", "gold", "silver", "stocks", "business", "debts")
        }
    result = zakat.calculate(zakat.ZakatInputs.from_form(values))
    with col2:
        st.metric(t("net_wealth", lang), f"PKR {result.net_wealth:,.0f}")
        st.metric(t("zakat_due", lang), f"PKR {round(result.zakat):,}")
        nisab = f"{result.nisab:,.0f}"
        if result.obligatory:
            st.success(t("zakat_obligatory", lang, nisab=nisab))
        else:
            st.info(t("below_nisab", lang, nisab=nisab))


def compass_dial(rotation, bearing, aligned):
    hub = "#059669" if aligned else "#f1f5f9"
    components.html(f"""
    <div style="display:flex;justify-content:center;">
      <svg width="260" height="260" viewBox="0 0 260 260">
        <circle cx="130" cy="130" r="120" fill="white" stroke="#064e3b" stroke-width="12"/>
        <text x="130" y="36" text-anchor="middle" fill="#94a3b8" font-weight="bold">N</text>
        <g transform="rotate({rotation:.1f} 130 130)">
          <rect x="126" y="40" width="8" height="80" rx="4" fill="#047857"/>
          <text x="130" y="38" text-anchor="middle" font-size="22">🕋</text>
        </g>
        <circle cx="130" cy="130" r="36" fill="{hub}"/>
        <text x="130" y="138" text-anchor="middle" font-size="20" font-weight="bold">{round(bearing)}°</text>
      </svg>
    </div>
    """, height=280)


def qibla_page():
    st.title(t("qibla_title", lang))

    if location is None:
        st.info(t("calculating", lang))
        return

    result = compute_bearing_and_distance(location.point)
    if st.session_state.get("compass") is None or st.session_state.compass.bearing_degrees != result.bearing_degrees:
        close_compass()
        st.session_state.compass = CompassSession(result.bearing_degrees)
        st.session_state.orientation_source = OrientationSource()
    session = st.session_state.compass

    col1, col2 = st.columns(2)
    with col2:
        st.metric(t("qibla_direction", lang), f"{result.bearing_degrees:.1f}°")
        st.metric(t("distance", lang), f"{result.display_distance_km:,} {t('km_away', lang)}")
        c1, c2 = st.columns(2)
        c1.metric(t("latitude", lang), f"{location.point.latitude:.4f}")
        c2.metric(t("longitude", lang), f"{location.point.longitude:.4f}")

    with col1:
        if session.state is SensorState.UNREQUESTED:
            if st.button(f"🧭 {t('enable_compass', lang)}"):
                session.request_permission()
                st.rerun()
        if session.state is SensorState.PERMISSION_REQUESTED:
            st.info(t("compass_waiting", lang))
            answer = streamlit_js_eval(js_expressions=permission_script(t("enable_compass", lang)), key="compass-permission")
            if answer == "granted":
                session.grant(st.session_state.orientation_source)
            elif answer is not None:
                session.deny()
        if session.state is SensorState.DENIED:
            st.warning(t("compass_denied", lang))
        if session.state is SensorState.GRANTED:
            sample = streamlit_js_eval(js_expressions=ORIENTATION_SAMPLE_JS, key=f"heading-{st.session_state.get('heading_tick', 0)}")
            if sample:
                st.session_state.orientation_source.emit(OrientationEvent.from_browser(sample))
            if st.button(f"🔄 {t('heading', lang)}"):
                st.session_state.heading_tick = st.session_state.get("heading_tick", 0) + 1
                st.rerun()

        heading = session.heading or 0.0
        compass_dial(needle_rotation(result.bearing_degrees, heading), result.bearing_degrees, session.aligned)
        if session.heading is not None:
            st.caption(f"{t('heading', lang)}: {session.heading:.0f}°")
            if session.aligned:
                st.success(t("aligned", lang))
            else:
                st.info(t("not_aligned", lang))


def tasbeeh_page():
    st.title(t("tasbeeh_title", lang))
    counter = st.session_state.tasbeeh

    col1, col2 = st.columns(2)
    with col1:
        index = st.selectbox(
            "Dhikr",
            options=list(range(len(DHIKRS))),
            index=counter.selected,
            format_func=lambda i: DHIKRS[i]["en"],
            label_visibility="collapsed",
        )
        if index != counter.selected:
            counter.reset()
            counter.select(index)
        dhikr = counter.dhikr
        text_block(dhikr["ar"], "arabic")
        st.caption(dhikr["ur_meaning"] if lang == "ur" else dhikr["en_meaning"])
        c1, c2 = st.columns(2)
        c1.metric(t("count", lang), counter.count)
        c2.metric(t("rounds", lang), counter.rounds_completed())
        st.progress(counter.progress())
        if st.button(f"📿 {t('tap', lang)}", use_container_width=True):
            counter.increment()
            st.rerun()
        if st.button(t("reset", lang)):
            counter.reset()
            st.rerun()

    with col2:
        st.subheader(t("set_target", lang))
        target = st.radio(t("set_target", lang), TARGETS, index=TARGETS.index(counter.target),
                          horizontal=True, label_visibility="collapsed")
        if target != counter.target:
            counter.set_target(target)
            st.rerun()
        if counter.history:
            st.subheader(t("history", lang))
            for entry in counter.history:
                st.markdown(f"**{entry['dhikr']}** · {entry['count']} · {entry['date']}")


PAGE_RENDERERS = {
    "dashboard": dashboard_page,
    "quran": quran_page,
    "hadith": hadith_page,
    "scholar": scholar_page,
    "zakat": zakat_page,
    "qibla": qibla_page,
    "tasbeeh": tasbeeh_page,
}

PAGE_RENDERERS[page]()

# Footer
st.markdown("---")
st.markdown("""
<div style="text-align: center; font-size: 0.8em; color: #666;">
    Always consult with knowledgeable scholars for specific religious rulings.
</div>
""", unsafe_allow_html=True)

# Rerun until the browser answers or the bounded wait gives way to the fallback
if location is None:
    time.sleep(min(st.session_state.location_request.remaining(), 1.0))
    st.rerun()
