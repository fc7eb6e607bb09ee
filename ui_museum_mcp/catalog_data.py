"""
UI Museum Catalog Data
Static reference data loaded once into the default Catalog:
- Zone-scoped gallery components
- Atomic-design elements (atom / molecule / organism / template)
- Themed zones, the six themes, and category metadata
"""


# =============================================================================
# ZONES
# Closed set of themed galleries. Every component's "zone" must resolve here.
# =============================================================================
ZONE_DATABASE: list[dict] = [
    {
        "id": "arcade",
        "name": "Arcade Basement",
        "description": "Retro gaming aesthetics with neon lights, pixel art, and cabinet-style interfaces",
        "aesthetic": "Retro gaming, neon lights, pixel art, CRT effects",
        "colors": {"primary": "#ff00ff", "secondary": "#00ffff", "accent": "#ffff00", "background": "#1a0a2e"},
        "tags": ["gaming", "retro", "neon", "pixel", "8-bit", "arcade"],
    },
    {
        "id": "cosmic",
        "name": "Cosmic Observatory",
        "description": "Space and astronomy themed with star fields, nebulae, and celestial animations",
        "aesthetic": "Deep space, nebulae, star clusters, astronomical data",
        "colors": {"primary": "#60a5fa", "secondary": "#c084fc", "accent": "#f472b6", "background": "#030712"},
        "tags": ["space", "astronomy", "stars", "nebula", "celestial", "sci-fi"],
    },
    {
        "id": "hacker",
        "name": "Hacker Terminal",
        "description": "Cyberpunk terminal aesthetics with matrix-style animations and green-on-black themes",
        "aesthetic": "Terminal, matrix, code rain, cyber security",
        "colors": {"primary": "#00ff00", "secondary": "#00ffff", "accent": "#ff00ff", "background": "#0a0a0f"},
        "tags": ["hacker", "terminal", "matrix", "cyber", "code", "security"],
    },
    {
        "id": "physics",
        "name": "Physics Playground",
        "description": "Interactive physics simulations with particles, gravity, and scientific visualizations",
        "aesthetic": "Scientific, particle systems, physics simulations",
        "colors": {"primary": "#3b82f6", "secondary": "#8b5cf6", "accent": "#f59e0b", "background": "#0f172a"},
        "tags": ["physics", "science", "particles", "simulation", "gravity", "waves"],
    },
    {
        "id": "mad-science",
        "name": "Mad Science Lab",
        "description": "Laboratory aesthetics with bubbling experiments, Tesla coils, and chemical reactions",
        "aesthetic": "Laboratory, experiments, Tesla coils, chemistry",
        "colors": {"primary": "#22c55e", "secondary": "#a855f7", "accent": "#f97316", "background": "#052e16"},
        "tags": ["science", "lab", "chemistry", "experiments", "tesla", "biology"],
    },
    {
        "id": "pulp",
        "name": "Pulp Detective",
        "description": "Film noir aesthetics with rain, neon signs, and mystery-themed interfaces",
        "aesthetic": "Noir, detective, rainy nights, typewriters, mystery",
        "colors": {"primary": "#d4a373", "secondary": "#e63946", "accent": "#f1faee", "background": "#1d3557"},
        "tags": ["noir", "detective", "mystery", "vintage", "crime", "rain"],
    },
    {
        "id": "organic",
        "name": "Organic Garden",
        "description": "Nature-inspired with growing plants, flowing water, and organic animations",
        "aesthetic": "Natural, botanical, organic growth, garden",
        "colors": {"primary": "#22c55e", "secondary": "#84cc16", "accent": "#f59e0b", "background": "#14532d"},
        "tags": ["nature", "plants", "garden", "organic", "botanical", "growth"],
    },
    {
        "id": "retro-office",
        "name": "Retro Office",
        "description": "70s-80s office aesthetics with CRT monitors, filing cabinets, and vintage tech",
        "aesthetic": "Vintage office, 70s-80s, CRT, analog tech",
        "colors": {"primary": "#d4a373", "secondary": "#6b705c", "accent": "#cb997e", "background": "#ffe8d6"},
        "tags": ["retro", "office", "vintage", "analog", "70s", "80s"],
    },
    {
        "id": "cinema",
        "name": "Cinema Stage",
        "description": "Movie theater and stage aesthetics with curtains, spotlights, and film elements",
        "aesthetic": "Theater, cinema, stage, film, Hollywood",
        "colors": {"primary": "#dc2626", "secondary": "#fbbf24", "accent": "#f8fafc", "background": "#1f1f1f"},
        "tags": ["cinema", "movie", "theater", "stage", "film", "spotlight"],
    },
    {
        "id": "geometry",
        "name": "Geometry Lab",
        "description": "Mathematical visualizations with fractals, tessellations, and geometric animations",
        "aesthetic": "Mathematical, fractals, tessellation, sacred geometry",
        "colors": {"primary": "#6366f1", "secondary": "#ec4899", "accent": "#14b8a6", "background": "#18181b"},
        "tags": ["geometry", "math", "fractal", "tessellation", "pattern", "visualization"],
    },
    {
        "id": "artist-studio",
        "name": "Artist Studio",
        "description": "Creative art studio with paint, brushes, canvas, and artistic effects",
        "aesthetic": "Art studio, painting, canvas, creative tools",
        "colors": {"primary": "#f97316", "secondary": "#8b5cf6", "accent": "#06b6d4", "background": "#fef3c7"},
        "tags": ["art", "painting", "canvas", "creative", "studio", "brush"],
    },
    {
        "id": "underwater",
        "name": "Underwater Depths",
        "description": "Ocean and aquatic themes with bubbles, waves, and bioluminescent effects",
        "aesthetic": "Ocean, deep sea, bioluminescence, aquatic",
        "colors": {"primary": "#0891b2", "secondary": "#06b6d4", "accent": "#22d3d1", "background": "#0c4a6e"},
        "tags": ["underwater", "ocean", "sea", "aquatic", "bubbles", "waves"],
    },
    {
        "id": "steampunk",
        "name": "Steampunk Workshop",
        "description": "Victorian-era machinery with gears, brass, steam, and clockwork mechanisms",
        "aesthetic": "Victorian, brass, gears, steam, clockwork",
        "colors": {"primary": "#b45309", "secondary": "#78350f", "accent": "#fbbf24", "background": "#292524"},
        "tags": ["steampunk", "gears", "brass", "victorian", "clockwork", "machinery"],
    },
    {
        "id": "cyberpunk",
        "name": "Cyberpunk District",
        "description": "Dystopian future with holographic displays, neon advertisements, and glitch effects",
        "aesthetic": "Dystopian, holographic, neon ads, glitch",
        "colors": {"primary": "#f43f5e", "secondary": "#8b5cf6", "accent": "#00ffff", "background": "#18181b"},
        "tags": ["cyberpunk", "dystopia", "hologram", "neon", "glitch", "future"],
    },
    {
        "id": "medieval",
        "name": "Medieval Scriptorium",
        "description": "Medieval manuscript aesthetics with illuminated letters, parchment, and Gothic elements",
        "aesthetic": "Medieval, manuscripts, Gothic, parchment",
        "colors": {"primary": "#b91c1c", "secondary": "#1e3a8a", "accent": "#ca8a04", "background": "#fef3c7"},
        "tags": ["medieval", "gothic", "manuscript", "parchment", "illuminated", "ancient"],
    },
    {
        "id": "space-station",
        "name": "Space Station",
        "description": "Futuristic space station with control panels, airlocks, and sci-fi interfaces",
        "aesthetic": "Sci-fi, space station, control panels, futuristic",
        "colors": {"primary": "#94a3b8", "secondary": "#3b82f6", "accent": "#ef4444", "background": "#1e293b"},
        "tags": ["space", "station", "sci-fi", "futuristic", "control", "panels"],
    },
]


# =============================================================================
# THEMES
# Exactly six palettes; the catalog loader rejects any other count.
# =============================================================================
THEME_DATABASE: list[dict] = [
    {
        "id": "default",
        "name": "Default",
        "description": "Clean, modern light theme with indigo accents",
        "colors": {"primary": "#6366f1", "background": "#ffffff", "surface": "#f8fafc", "text": "#1e293b", "accent": "#8b5cf6"},
    },
    {
        "id": "dark",
        "name": "Dark",
        "description": "Dark mode with subtle contrast and purple accents",
        "colors": {"primary": "#818cf8", "background": "#0f172a", "surface": "#1e293b", "text": "#f1f5f9", "accent": "#a78bfa"},
    },
    {
        "id": "brutal",
        "name": "Brutal",
        "description": "Neo-brutalist with hard shadows and bold colors",
        "colors": {"primary": "#000000", "background": "#ffffff", "surface": "#fef08a", "text": "#000000", "accent": "#ef4444"},
    },
    {
        "id": "neon",
        "name": "Neon",
        "description": "Cyberpunk with neon glows and dark backgrounds",
        "colors": {"primary": "#00ff88", "background": "#0a0a0f", "surface": "#1a1a2e", "text": "#e0e0e0", "accent": "#ff00ff"},
    },
    {
        "id": "cosmic",
        "name": "Cosmic",
        "description": "Deep space theme with aurora accents",
        "colors": {"primary": "#60a5fa", "background": "#030712", "surface": "#111827", "text": "#f3f4f6", "accent": "#c084fc"},
    },
    {
        "id": "glass",
        "name": "Glass",
        "description": "Glassmorphism with blur effects and transparency",
        "colors": {"primary": "#3b82f6", "background": "#f0f9ff", "surface": "rgba(255,255,255,0.7)", "text": "#1e3a5f", "accent": "#0ea5e9"},
    },
]


# =============================================================================
# ELEMENT CATEGORIES
# Layer-scoped labels; counts are derived from ELEMENT_DATABASE at load time.
# =============================================================================
ELEMENT_CATEGORY_DATABASE: list[dict] = [
    # Atom categories
    {"id": "backgrounds", "name": "Backgrounds", "description": "Patterns, gradients, and textures", "icon": "Layers", "layer": "atom"},
    {"id": "shadows", "name": "Shadows", "description": "Box shadows and glow effects", "icon": "Sun", "layer": "atom"},
    {"id": "typography", "name": "Typography", "description": "Text styles and effects", "icon": "Type", "layer": "atom"},
    {"id": "icons", "name": "Icons", "description": "SVG icon components", "icon": "Star", "layer": "atom"},
    {"id": "animations", "name": "Animations", "description": "Keyframes and motion utilities", "icon": "Sparkles", "layer": "atom"},

    # Molecule categories
    {"id": "buttons", "name": "Buttons", "description": "Button components", "icon": "MousePointerClick", "layer": "molecule"},
    {"id": "inputs", "name": "Inputs", "description": "Input and form controls", "icon": "TextCursor", "layer": "molecule"},
    {"id": "cards", "name": "Cards", "description": "Card containers", "icon": "Square", "layer": "molecule"},
    {"id": "badges", "name": "Badges", "description": "Badges and tags", "icon": "Tag", "layer": "molecule"},
    {"id": "indicators", "name": "Indicators", "description": "Progress and status indicators", "icon": "Loader", "layer": "molecule"},
    {"id": "feedback", "name": "Feedback", "description": "Tooltips, toasts, and alerts", "icon": "Bell", "layer": "molecule"},

    # Organism categories
    {"id": "layout", "name": "Layout Sections", "description": "Heroes, feature blocks, pricing and other page sections", "icon": "LayoutTemplate", "layer": "organism"},
    {"id": "navigation", "name": "Navigation", "description": "Navigation bars and footers", "icon": "Navigation", "layer": "organism"},

    # Template categories
    {"id": "marketing", "name": "Marketing Pages", "description": "Landing and pricing page layouts", "icon": "Megaphone", "layer": "template"},
    {"id": "content", "name": "Content Pages", "description": "About pages and articles", "icon": "FileText", "layer": "template"},
    {"id": "application", "name": "Application Shells", "description": "Dashboards and app layouts", "icon": "AppWindow", "layer": "template"},
]


# =============================================================================
# COMPONENT CATEGORIES
# Gallery-wide labels shared by components across zones.
# =============================================================================
COMPONENT_CATEGORY_DATABASE: list[dict] = [
    {"id": "typography", "name": "Typography & Text", "description": "Headings, body text, display fonts, and text effects across all design systems", "icon": "Type"},
    {"id": "buttons", "name": "Buttons & Actions", "description": "Primary, secondary, special effects, and interactive button variations", "icon": "MousePointerClick"},
    {"id": "cards", "name": "Cards & Containers", "description": "Standard cards, textured surfaces, and themed container components", "icon": "Square"},
    {"id": "inputs", "name": "Inputs & Forms", "description": "Text fields, selects, checkboxes, and specialized input controls", "icon": "TextCursor"},
    {"id": "progress", "name": "Progress & Status", "description": "Progress bars, loaders, status indicators, and countdown elements", "icon": "Loader"},
    {"id": "navigation", "name": "Navigation", "description": "Tabs, menus, breadcrumbs, and creative navigation patterns", "icon": "Navigation"},
    {"id": "data-display", "name": "Data Display", "description": "Galleries, lists, catalogs, and data visualization components", "icon": "LayoutGrid"},
    {"id": "feedback", "name": "Feedback & Alerts", "description": "Notifications, tooltips, celebrations, and user feedback elements", "icon": "Bell"},
    {"id": "toys", "name": "Interactive Toys", "description": "Games, physics simulations, and delightful interactive experiences", "icon": "Gamepad2"},
    {"id": "transitions", "name": "Transitions & Effects", "description": "Page transitions, reveals, morphs, and animated effects", "icon": "Sparkles"},
    {"id": "backgrounds", "name": "Backgrounds & Ambience", "description": "Textures, patterns, gradients, and atmospheric background treatments", "icon": "Layers"},
    {"id": "widgets", "name": "Specialized Widgets", "description": "Cassette players, floppy disks, projectors, and retro tech widgets", "icon": "Cog"},
]


# =============================================================================
# ELEMENTS
# Metadata-only view of the atomic-design registry, in browsing order.
# =============================================================================
ELEMENT_DATABASE: list[dict] = [
    # Atoms - Backgrounds
    {"id": "bg-grid", "name": "Grid Background", "layer": "atom", "category": "backgrounds", "description": "Subtle grid pattern background", "tags": ["background", "grid", "pattern"]},
    {"id": "bg-dots", "name": "Dot Pattern", "layer": "atom", "category": "backgrounds", "description": "Polka dot pattern background", "tags": ["background", "dots", "pattern"]},
    {"id": "bg-gradient-radial", "name": "Radial Gradient", "layer": "atom", "category": "backgrounds", "description": "Radial gradient background", "tags": ["background", "gradient", "radial"]},
    {"id": "bg-noise", "name": "Noise Texture", "layer": "atom", "category": "backgrounds", "description": "Film grain noise overlay", "tags": ["background", "noise", "texture"]},

    # Atoms - Shadows
    {"id": "shadow-sm", "name": "Small Shadow", "layer": "atom", "category": "shadows", "description": "Subtle elevation shadow", "tags": ["shadow", "elevation", "small"]},
    {"id": "shadow-md", "name": "Medium Shadow", "layer": "atom", "category": "shadows", "description": "Standard card shadow", "tags": ["shadow", "elevation", "medium"]},
    {"id": "shadow-lg", "name": "Large Shadow", "layer": "atom", "category": "shadows", "description": "Prominent shadow for modals", "tags": ["shadow", "elevation", "large"]},
    {"id": "shadow-hard", "name": "Hard Shadow", "layer": "atom", "category": "shadows", "description": "Neo-brutalist offset shadow", "tags": ["shadow", "brutal", "hard"]},
    {"id": "shadow-glow", "name": "Glow Shadow", "layer": "atom", "category": "shadows", "description": "Neon glow effect", "tags": ["shadow", "glow", "neon"]},

    # Atoms - Typography
    {"id": "text-display", "name": "Display Text", "layer": "atom", "category": "typography", "description": "Large display heading", "tags": ["typography", "heading", "display"]},
    {"id": "text-heading", "name": "Heading", "layer": "atom", "category": "typography", "description": "Section heading", "tags": ["typography", "heading"]},
    {"id": "text-body", "name": "Body Text", "layer": "atom", "category": "typography", "description": "Standard body text", "tags": ["typography", "body", "paragraph"]},
    {"id": "text-caption", "name": "Caption", "layer": "atom", "category": "typography", "description": "Small caption text", "tags": ["typography", "caption", "small"]},

    # Atoms - Icons
    {"id": "icon-arrow-right", "name": "Arrow Right", "layer": "atom", "category": "icons", "description": "Right arrow icon", "tags": ["icon", "arrow", "navigation"]},
    {"id": "icon-check", "name": "Check", "layer": "atom", "category": "icons", "description": "Checkmark icon", "tags": ["icon", "check", "success"]},
    {"id": "icon-x", "name": "Close", "layer": "atom", "category": "icons", "description": "X/close icon", "tags": ["icon", "close", "x"]},
    {"id": "icon-menu", "name": "Menu", "layer": "atom", "category": "icons", "description": "Hamburger menu icon", "tags": ["icon", "menu", "navigation"]},
    {"id": "icon-search", "name": "Search", "layer": "atom", "category": "icons", "description": "Search/magnifier icon", "tags": ["icon", "search"]},
    {"id": "icon-user", "name": "User", "layer": "atom", "category": "icons", "description": "User/profile icon", "tags": ["icon", "user", "profile"]},
    {"id": "icon-settings", "name": "Settings", "layer": "atom", "category": "icons", "description": "Settings gear icon", "tags": ["icon", "settings", "cog"]},
    {"id": "icon-star", "name": "Star", "layer": "atom", "category": "icons", "description": "Star/favorite icon", "tags": ["icon", "star", "favorite"]},

    # Atoms - Animations
    {"id": "anim-fade-in", "name": "Fade In", "layer": "atom", "category": "animations", "description": "Fade in animation", "tags": ["animation", "fade", "entrance"]},
    {"id": "anim-slide-up", "name": "Slide Up", "layer": "atom", "category": "animations", "description": "Slide up animation", "tags": ["animation", "slide", "entrance"]},
    {"id": "anim-pulse", "name": "Pulse", "layer": "atom", "category": "animations", "description": "Pulsing animation", "tags": ["animation", "pulse", "attention"]},
    {"id": "anim-spin", "name": "Spin", "layer": "atom", "category": "animations", "description": "Spinning animation", "tags": ["animation", "spin", "loading"]},

    # Molecules - Buttons
    {"id": "btn-primary", "name": "Primary Button", "layer": "molecule", "category": "buttons", "description": "Main call-to-action button", "tags": ["button", "primary", "cta"], "composed_of": ["text-body", "shadow-sm"]},
    {"id": "btn-secondary", "name": "Secondary Button", "layer": "molecule", "category": "buttons", "description": "Secondary action button", "tags": ["button", "secondary"], "composed_of": ["text-body"]},
    {"id": "btn-ghost", "name": "Ghost Button", "layer": "molecule", "category": "buttons", "description": "Transparent button with border", "tags": ["button", "ghost", "outline"]},
    {"id": "btn-icon", "name": "Icon Button", "layer": "molecule", "category": "buttons", "description": "Button with icon only", "tags": ["button", "icon"]},
    {"id": "btn-brutal", "name": "Brutal Button", "layer": "molecule", "category": "buttons", "description": "Neo-brutalist style button", "tags": ["button", "brutal", "bold"], "composed_of": ["shadow-hard"]},

    # Molecules - Inputs
    {"id": "input-text", "name": "Text Input", "layer": "molecule", "category": "inputs", "description": "Standard text input field", "tags": ["input", "text", "form"]},
    {"id": "input-email", "name": "Email Input", "layer": "molecule", "category": "inputs", "description": "Email input with validation", "tags": ["input", "email", "form"]},
    {"id": "input-password", "name": "Password Input", "layer": "molecule", "category": "inputs", "description": "Password input with toggle", "tags": ["input", "password", "form"]},
    {"id": "input-textarea", "name": "Textarea", "layer": "molecule", "category": "inputs", "description": "Multi-line text area", "tags": ["input", "textarea", "form"]},
    {"id": "input-select", "name": "Select Dropdown", "layer": "molecule", "category": "inputs", "description": "Dropdown select input", "tags": ["input", "select", "form"]},
    {"id": "input-checkbox", "name": "Checkbox", "layer": "molecule", "category": "inputs", "description": "Checkbox input", "tags": ["input", "checkbox", "form"]},
    {"id": "input-radio", "name": "Radio Button", "layer": "molecule", "category": "inputs", "description": "Radio button input", "tags": ["input", "radio", "form"]},
    {"id": "input-search", "name": "Search Input", "layer": "molecule", "category": "inputs", "description": "Search input with icon", "tags": ["input", "search", "form"]},

    # Molecules - Cards
    {"id": "card-basic", "name": "Basic Card", "layer": "molecule", "category": "cards", "description": "Simple card container", "tags": ["card", "container"], "composed_of": ["shadow-md"]},
    {"id": "card-image", "name": "Image Card", "layer": "molecule", "category": "cards", "description": "Card with image header", "tags": ["card", "image", "media"]},
    {"id": "card-pricing", "name": "Pricing Card", "layer": "molecule", "category": "cards", "description": "Pricing plan card", "tags": ["card", "pricing", "plan"]},
    {"id": "card-testimonial", "name": "Testimonial Card", "layer": "molecule", "category": "cards", "description": "Customer testimonial card", "tags": ["card", "testimonial", "quote"]},
    {"id": "card-feature", "name": "Feature Card", "layer": "molecule", "category": "cards", "description": "Feature highlight card", "tags": ["card", "feature", "benefit"]},
    {"id": "card-team", "name": "Team Member Card", "layer": "molecule", "category": "cards", "description": "Team member profile card", "tags": ["card", "team", "profile"]},
    {"id": "card-stat", "name": "Stat Card", "layer": "molecule", "category": "cards", "description": "Statistic/metric card", "tags": ["card", "stat", "metric", "number"]},

    # Molecules - Badges & Indicators
    {"id": "badge-solid", "name": "Solid Badge", "layer": "molecule", "category": "badges", "description": "Solid background badge", "tags": ["badge", "label", "tag"]},
    {"id": "badge-outline", "name": "Outline Badge", "layer": "molecule", "category": "badges", "description": "Outlined badge", "tags": ["badge", "outline", "tag"]},
    {"id": "badge-status", "name": "Status Badge", "layer": "molecule", "category": "badges", "description": "Status indicator badge", "tags": ["badge", "status", "indicator"]},
    {"id": "avatar", "name": "Avatar", "layer": "molecule", "category": "indicators", "description": "User avatar image", "tags": ["avatar", "user", "profile"]},
    {"id": "progress-bar", "name": "Progress Bar", "layer": "molecule", "category": "indicators", "description": "Progress indicator bar", "tags": ["progress", "loading", "indicator"]},
    {"id": "spinner", "name": "Loading Spinner", "layer": "molecule", "category": "indicators", "description": "Loading spinner animation", "tags": ["spinner", "loading", "indicator"], "composed_of": ["anim-spin"]},

    # Molecules - Feedback
    {"id": "alert-info", "name": "Info Alert", "layer": "molecule", "category": "feedback", "description": "Informational alert message", "tags": ["alert", "info", "message"]},
    {"id": "alert-success", "name": "Success Alert", "layer": "molecule", "category": "feedback", "description": "Success alert message", "tags": ["alert", "success", "message"]},
    {"id": "alert-warning", "name": "Warning Alert", "layer": "molecule", "category": "feedback", "description": "Warning alert message", "tags": ["alert", "warning", "message"]},
    {"id": "alert-error", "name": "Error Alert", "layer": "molecule", "category": "feedback", "description": "Error alert message", "tags": ["alert", "error", "message"]},
    {"id": "toast", "name": "Toast Notification", "layer": "molecule", "category": "feedback", "description": "Toast notification popup", "tags": ["toast", "notification", "popup"]},

    # Organisms - Heroes
    {
        "id": "hero-centered",
        "name": "Centered Hero",
        "layer": "organism",
        "category": "layout",
        "description": "Hero section with centered content",
        "tags": ["hero", "header", "landing", "centered"],
        "composed_of": ["text-display", "text-body", "btn-primary", "btn-secondary"],
        "variants": ["default", "dark", "gradient"],
        "slots": [
            {"id": "title", "name": "Title", "type": "text", "required": True, "description": "Main headline"},
            {"id": "subtitle", "name": "Subtitle", "type": "text", "required": False, "description": "Supporting text"},
            {"id": "primaryCta", "name": "Primary CTA", "type": "action", "required": False, "description": "Primary button"},
            {"id": "secondaryCta", "name": "Secondary CTA", "type": "action", "required": False, "description": "Secondary button"},
        ],
    },
    {
        "id": "hero-split",
        "name": "Split Hero",
        "layer": "organism",
        "category": "layout",
        "description": "Hero with text on one side, image on other",
        "tags": ["hero", "header", "landing", "split", "image"],
        "composed_of": ["text-display", "text-body", "btn-primary"],
        "variants": ["default", "reversed", "dark"],
        "slots": [
            {"id": "title", "name": "Title", "type": "text", "required": True, "description": "Main headline"},
            {"id": "subtitle", "name": "Subtitle", "type": "text", "required": False, "description": "Supporting text"},
            {"id": "media", "name": "Media", "type": "image", "required": False, "description": "Hero image or video"},
            {"id": "cta", "name": "CTA", "type": "action", "required": False, "description": "Call to action button"},
        ],
    },

    # Organisms - Feature Sections
    {
        "id": "feature-grid",
        "name": "Feature Grid",
        "layer": "organism",
        "category": "layout",
        "description": "Grid of feature cards",
        "tags": ["features", "grid", "benefits", "cards"],
        "composed_of": ["card-feature", "text-heading"],
        "variants": ["2-col", "3-col", "4-col"],
        "slots": [
            {"id": "heading", "name": "Section Heading", "type": "text", "required": False, "description": "Section title"},
            {"id": "subheading", "name": "Subheading", "type": "text", "required": False, "description": "Section description"},
            {"id": "features", "name": "Features", "type": "list", "required": True, "description": "List of feature items"},
        ],
    },
    {
        "id": "feature-alternating",
        "name": "Alternating Features",
        "layer": "organism",
        "category": "layout",
        "description": "Features with alternating image/text layout",
        "tags": ["features", "alternating", "zigzag"],
        "composed_of": ["text-heading", "text-body"],
        "slots": [
            {"id": "features", "name": "Features", "type": "list", "required": True, "description": "List of feature sections"},
        ],
    },

    # Organisms - Pricing
    {
        "id": "pricing-table",
        "name": "Pricing Table",
        "layer": "organism",
        "category": "layout",
        "description": "Pricing plans comparison table",
        "tags": ["pricing", "plans", "comparison", "table"],
        "composed_of": ["card-pricing", "btn-primary", "badge-solid"],
        "variants": ["2-tier", "3-tier", "4-tier"],
        "slots": [
            {"id": "heading", "name": "Section Heading", "type": "text", "required": False, "description": "Pricing section title"},
            {"id": "plans", "name": "Pricing Plans", "type": "list", "required": True, "description": "List of pricing plans"},
        ],
    },

    # Organisms - Testimonials
    {
        "id": "testimonials-carousel",
        "name": "Testimonials Carousel",
        "layer": "organism",
        "category": "layout",
        "description": "Carousel of customer testimonials",
        "tags": ["testimonials", "carousel", "reviews", "social-proof"],
        "composed_of": ["card-testimonial", "avatar"],
        "slots": [
            {"id": "heading", "name": "Section Heading", "type": "text", "required": False, "description": "Section title"},
            {"id": "testimonials", "name": "Testimonials", "type": "list", "required": True, "description": "List of testimonials"},
        ],
    },
    {
        "id": "testimonials-grid",
        "name": "Testimonials Grid",
        "layer": "organism",
        "category": "layout",
        "description": "Grid layout of testimonials",
        "tags": ["testimonials", "grid", "reviews"],
        "composed_of": ["card-testimonial"],
    },

    # Organisms - CTA Sections
    {
        "id": "cta-banner",
        "name": "CTA Banner",
        "layer": "organism",
        "category": "layout",
        "description": "Call-to-action banner section",
        "tags": ["cta", "banner", "conversion"],
        "composed_of": ["text-heading", "btn-primary"],
        "variants": ["default", "dark", "gradient", "brutal"],
        "slots": [
            {"id": "title", "name": "Title", "type": "text", "required": True, "description": "CTA headline"},
            {"id": "subtitle", "name": "Subtitle", "type": "text", "required": False, "description": "Supporting text"},
            {"id": "cta", "name": "CTA Button", "type": "action", "required": True, "description": "Action button"},
        ],
    },
    {
        "id": "cta-newsletter",
        "name": "Newsletter CTA",
        "layer": "organism",
        "category": "layout",
        "description": "Newsletter signup section",
        "tags": ["cta", "newsletter", "signup", "email"],
        "composed_of": ["input-email", "btn-primary"],
        "slots": [
            {"id": "title", "name": "Title", "type": "text", "required": True, "description": "Section headline"},
            {"id": "description", "name": "Description", "type": "text", "required": False, "description": "Value proposition"},
        ],
    },

    # Organisms - Navigation
    {
        "id": "navbar",
        "name": "Navigation Bar",
        "layer": "organism",
        "category": "navigation",
        "description": "Top navigation bar with logo and links",
        "tags": ["navigation", "navbar", "header", "menu"],
        "composed_of": ["btn-ghost", "btn-primary"],
        "variants": ["default", "transparent", "dark"],
        "slots": [
            {"id": "logo", "name": "Logo", "type": "image", "required": True, "description": "Brand logo"},
            {"id": "links", "name": "Nav Links", "type": "list", "required": True, "description": "Navigation links"},
            {"id": "cta", "name": "CTA", "type": "action", "required": False, "description": "Header CTA button"},
        ],
    },
    {
        "id": "footer",
        "name": "Footer",
        "layer": "organism",
        "category": "navigation",
        "description": "Page footer with links and copyright",
        "tags": ["footer", "navigation", "links"],
        "variants": ["simple", "multi-column", "dark"],
        "slots": [
            {"id": "companyName", "name": "Company Name", "type": "text", "required": True, "description": "Brand name"},
            {"id": "links", "name": "Footer Links", "type": "list", "required": False, "description": "Link columns"},
            {"id": "social", "name": "Social Links", "type": "list", "required": False, "description": "Social media links"},
            {"id": "copyright", "name": "Copyright", "type": "text", "required": False, "description": "Copyright text"},
        ],
    },

    # Organisms - Stats, FAQ, Team
    {
        "id": "stats-row",
        "name": "Stats Row",
        "layer": "organism",
        "category": "layout",
        "description": "Row of statistic/metric cards",
        "tags": ["stats", "metrics", "numbers", "data"],
        "composed_of": ["card-stat"],
        "slots": [
            {"id": "stats", "name": "Statistics", "type": "list", "required": True, "description": "List of stat items"},
        ],
    },
    {
        "id": "faq-accordion",
        "name": "FAQ Accordion",
        "layer": "organism",
        "category": "layout",
        "description": "Expandable FAQ section",
        "tags": ["faq", "accordion", "questions", "support"],
        "slots": [
            {"id": "heading", "name": "Section Heading", "type": "text", "required": False, "description": "FAQ section title"},
            {"id": "questions", "name": "Questions", "type": "list", "required": True, "description": "List of FAQ items"},
        ],
    },
    {
        "id": "team-grid",
        "name": "Team Grid",
        "layer": "organism",
        "category": "layout",
        "description": "Grid of team member cards",
        "tags": ["team", "grid", "people", "about"],
        "composed_of": ["card-team", "avatar"],
        "slots": [
            {"id": "heading", "name": "Section Heading", "type": "text", "required": False, "description": "Section title"},
            {"id": "members", "name": "Team Members", "type": "list", "required": True, "description": "List of team members"},
        ],
    },

    # Templates - Full page layouts
    {
        "id": "template-landing",
        "name": "Landing Page",
        "layer": "template",
        "category": "marketing",
        "description": "Complete landing page template",
        "tags": ["template", "landing", "marketing", "saas"],
        "composed_of": ["navbar", "hero-centered", "feature-grid", "testimonials-carousel", "pricing-table", "cta-banner", "footer"],
    },
    {
        "id": "template-pricing",
        "name": "Pricing Page",
        "layer": "template",
        "category": "marketing",
        "description": "Dedicated pricing page template",
        "tags": ["template", "pricing", "plans"],
        "composed_of": ["navbar", "hero-centered", "pricing-table", "faq-accordion", "cta-banner", "footer"],
    },
    {
        "id": "template-about",
        "name": "About Page",
        "layer": "template",
        "category": "content",
        "description": "Company about page template",
        "tags": ["template", "about", "company", "team"],
        "composed_of": ["navbar", "hero-split", "stats-row", "team-grid", "cta-banner", "footer"],
    },
    {
        "id": "template-blog-post",
        "name": "Blog Post",
        "layer": "template",
        "category": "content",
        "description": "Blog article page template",
        "tags": ["template", "blog", "article", "content"],
        "composed_of": ["navbar", "footer"],
    },
    {
        "id": "template-dashboard",
        "name": "Dashboard Shell",
        "layer": "template",
        "category": "application",
        "description": "App dashboard layout template",
        "tags": ["template", "dashboard", "app", "admin"],
        "composed_of": ["navbar", "stats-row"],
    },
]


# =============================================================================
# COMPONENTS
# Zone gallery entries. Display metadata (source_*, preview_size) is opaque.
# =============================================================================
COMPONENT_DATABASE: list[dict] = [
    # Arcade Basement
    {"id": "tetris-review", "name": "Tetris Review", "zone": "arcade", "categories": ["feedback", "toys"], "description": "Star rating built from falling tetromino blocks", "tags": ["rating", "review", "game", "blocks"], "is_interactive": True, "source_project": "arcade", "source_file": "library/arcade/index.tsx", "preview_size": "medium"},
    {"id": "space-invaders-progress", "name": "Space Invaders Progress", "zone": "arcade", "categories": ["progress"], "description": "Progress bar cleared by a marching invader fleet", "tags": ["progress", "game", "pixel", "loading"], "is_interactive": False, "source_project": "arcade", "source_file": "library/arcade/index.tsx", "preview_size": "medium"},
    {"id": "scratch-card", "name": "Scratch Card", "zone": "arcade", "categories": ["toys", "cards"], "description": "Scratch-off lottery card revealing hidden content", "tags": ["reveal", "card", "game", "prize"], "is_interactive": True, "source_project": "arcade", "source_file": "library/arcade/index.tsx", "preview_size": "medium"},
    {"id": "cassette-player", "name": "Cassette Player", "zone": "arcade", "categories": ["widgets"], "description": "Tape deck media player with spinning reels", "tags": ["media", "audio", "retro", "player"], "is_interactive": True, "source_project": "arcade", "source_file": "library/arcade/index.tsx", "preview_size": "large"},

    # Cosmic Observatory
    {"id": "star-field", "name": "Star Field", "zone": "cosmic", "categories": ["backgrounds"], "description": "Parallax star field for hero backdrops", "tags": ["hero", "background", "stars", "parallax"], "is_interactive": False, "source_project": "cosmic", "source_file": "library/cosmic/index.tsx", "preview_size": "large"},
    {"id": "planet-orbit", "name": "Planet Orbit", "zone": "cosmic", "categories": ["navigation"], "description": "Menu items orbiting a central planet", "tags": ["menu", "orbit", "animation"], "is_interactive": True, "source_project": "cosmic", "source_file": "library/cosmic/index.tsx", "preview_size": "large"},
    {"id": "nebula-gradient", "name": "Nebula Gradient", "zone": "cosmic", "categories": ["backgrounds"], "description": "Slowly shifting nebula gradient", "tags": ["gradient", "background", "hero", "ambient"], "is_interactive": False, "source_project": "cosmic", "source_file": "library/cosmic/index.tsx", "preview_size": "fullscreen"},
    {"id": "constellation-map", "name": "Constellation Map", "zone": "cosmic", "categories": ["data-display"], "description": "Connect-the-dots constellation data graph", "tags": ["graph", "stars", "data", "network"], "is_interactive": True, "source_project": "cosmic", "source_file": "library/cosmic/index.tsx", "preview_size": "large"},

    # Hacker Terminal
    {"id": "bios-boot", "name": "BIOS Boot", "zone": "hacker", "categories": ["progress", "transitions"], "description": "Boot sequence loader with scrolling POST output", "tags": ["loading", "terminal", "boot"], "is_interactive": False, "source_project": "hacker", "source_file": "library/hacker/index.tsx", "preview_size": "medium"},
    {"id": "matrix-compiler", "name": "Matrix Compiler", "zone": "hacker", "categories": ["backgrounds", "typography"], "description": "Code rain that resolves into a hero headline", "tags": ["matrix", "code", "hero", "text"], "is_interactive": False, "source_project": "hacker", "source_file": "library/hacker/index.tsx", "preview_size": "large"},
    {"id": "encryption-hover", "name": "Encryption Hover", "zone": "hacker", "categories": ["typography", "transitions"], "description": "Text scrambles into cipher glyphs on hover", "tags": ["text", "hover", "scramble"], "is_interactive": True, "source_project": "hacker", "source_file": "library/hacker/index.tsx", "preview_size": "small"},
    {"id": "terminal-command", "name": "Terminal Command", "zone": "hacker", "categories": ["inputs"], "description": "Command-line style text input with history", "tags": ["input", "terminal", "form", "command"], "is_interactive": True, "source_project": "hacker", "source_file": "library/hacker/index.tsx", "preview_size": "medium"},

    # Physics Playground
    {"id": "newtons-cradle", "name": "Newton's Cradle", "zone": "physics", "categories": ["toys"], "description": "Swinging cradle of colliding spheres", "tags": ["physics", "momentum", "toy"], "is_interactive": True, "source_project": "physics", "source_file": "library/physics/index.tsx", "preview_size": "medium"},
    {"id": "magnetic-drag", "name": "Magnetic Drag", "zone": "physics", "categories": ["buttons"], "description": "Button that snaps toward the cursor like a magnet", "tags": ["button", "magnetic", "cursor"], "is_interactive": True, "source_project": "physics", "source_file": "library/physics/index.tsx", "preview_size": "small"},
    {"id": "bubble-wrap", "name": "Bubble Wrap", "zone": "physics", "categories": ["toys"], "description": "Poppable bubble wrap grid", "tags": ["toy", "grid", "pop"], "is_interactive": True, "source_project": "physics", "source_file": "library/physics/index.tsx", "preview_size": "medium"},
    {"id": "pendulum-timer", "name": "Pendulum Timer", "zone": "physics", "categories": ["progress"], "description": "Countdown driven by a swinging pendulum", "tags": ["timer", "countdown", "physics"], "is_interactive": False, "source_project": "physics", "source_file": "library/physics/index.tsx", "preview_size": "medium"},

    # Mad Science Lab
    {"id": "liquid-flask", "name": "Liquid Flask", "zone": "mad-science", "categories": ["progress"], "description": "Flask filling with bubbling liquid as progress", "tags": ["progress", "liquid", "lab"], "is_interactive": False, "source_project": "mad-science", "source_file": "library/mad-science/index.tsx", "preview_size": "medium"},
    {"id": "decoder-ring", "name": "Decoder Ring", "zone": "mad-science", "categories": ["inputs"], "description": "Rotating cipher dial for entering codes", "tags": ["input", "dial", "cipher"], "is_interactive": True, "source_project": "mad-science", "source_file": "library/mad-science/index.tsx", "preview_size": "medium"},
    {"id": "gears-menu", "name": "Gears Menu", "zone": "mad-science", "categories": ["navigation"], "description": "Interlocking gear navigation menu", "tags": ["menu", "navigation", "gears"], "is_interactive": True, "source_project": "mad-science", "source_file": "library/mad-science/index.tsx", "preview_size": "large"},

    # Pulp Detective
    {"id": "noir-card", "name": "Noir Card", "zone": "pulp", "categories": ["cards"], "description": "Case-file card with rain-streaked glass", "tags": ["card", "noir", "rain"], "is_interactive": False, "source_project": "pulp", "source_file": "library/pulp/index.tsx", "preview_size": "medium"},
    {"id": "tv-channels", "name": "TV Channels", "zone": "pulp", "categories": ["navigation", "transitions"], "description": "Channel-flipping tab navigation with static bursts", "tags": ["tabs", "navigation", "static"], "is_interactive": True, "source_project": "pulp", "source_file": "library/pulp/index.tsx", "preview_size": "medium"},
    {"id": "origami-submit", "name": "Origami Submit", "zone": "pulp", "categories": ["buttons", "transitions"], "description": "Submit button that folds into a paper plane", "tags": ["button", "submit", "form"], "is_interactive": True, "source_project": "pulp", "source_file": "library/pulp/index.tsx", "preview_size": "small"},

    # Organic Garden
    {"id": "worn-leather-card", "name": "Worn Leather Card", "zone": "organic", "categories": ["cards"], "description": "Stitched leather card container", "tags": ["card", "texture", "leather"], "is_interactive": False, "source_project": "organic", "source_file": "library/organic/index.tsx", "preview_size": "medium"},
    {"id": "moss-growth-bar", "name": "Moss Growth Bar", "zone": "organic", "categories": ["progress"], "description": "Progress bar overgrown with moss", "tags": ["progress", "growth", "nature"], "is_interactive": False, "source_project": "organic", "source_file": "library/organic/index.tsx", "preview_size": "small"},
    {"id": "water-ripple-button", "name": "Water Ripple Button", "zone": "organic", "categories": ["buttons"], "description": "Button that ripples like a pond surface", "tags": ["button", "ripple", "water"], "is_interactive": True, "source_project": "organic", "source_file": "library/organic/index.tsx", "preview_size": "small"},

    # Retro Office
    {"id": "typewriter-text", "name": "Typewriter Text", "zone": "retro-office", "categories": ["typography"], "description": "Hero headline typed out key by key", "tags": ["text", "typewriter", "hero"], "is_interactive": False, "source_project": "retro-office", "source_file": "library/retro-office/index.tsx", "preview_size": "medium"},
    {"id": "card-catalog", "name": "Card Catalog", "zone": "retro-office", "categories": ["data-display"], "description": "Library drawer of index cards for browsing lists", "tags": ["list", "catalog", "drawer"], "is_interactive": True, "source_project": "retro-office", "source_file": "library/retro-office/index.tsx", "preview_size": "large"},
    {"id": "floppy-disk-save", "name": "Floppy Disk Save", "zone": "retro-office", "categories": ["buttons", "widgets"], "description": "Save button shaped like a floppy disk", "tags": ["button", "save", "retro"], "is_interactive": True, "source_project": "retro-office", "source_file": "library/retro-office/index.tsx", "preview_size": "small"},

    # Cinema Stage
    {"id": "spotlight-focus", "name": "Spotlight Focus", "zone": "cinema", "categories": ["transitions"], "description": "Spotlight that follows the cursor over the stage", "tags": ["spotlight", "hover", "focus"], "is_interactive": True, "source_project": "cinema", "source_file": "library/cinema/index.tsx", "preview_size": "large"},
    {"id": "filmstrip-gallery", "name": "Filmstrip Gallery", "zone": "cinema", "categories": ["data-display"], "description": "Scrolling filmstrip image gallery", "tags": ["gallery", "images", "film"], "is_interactive": True, "source_project": "cinema", "source_file": "library/cinema/index.tsx", "preview_size": "large"},
    {"id": "boom-mic-tooltip", "name": "Boom Mic Tooltip", "zone": "cinema", "categories": ["feedback"], "description": "Tooltip lowered into frame on a boom mic", "tags": ["tooltip", "hover", "film"], "is_interactive": True, "source_project": "cinema", "source_file": "library/cinema/index.tsx", "preview_size": "small"},

    # Geometry Lab
    {"id": "hexagon-grid", "name": "Hexagon Grid", "zone": "geometry", "categories": ["data-display", "backgrounds"], "description": "Honeycomb grid layout for tiles", "tags": ["grid", "hexagon", "layout"], "is_interactive": False, "source_project": "geometry", "source_file": "library/geometry/index.tsx", "preview_size": "large"},
    {"id": "fractal-zoom", "name": "Fractal Zoom", "zone": "geometry", "categories": ["backgrounds", "transitions"], "description": "Endless fractal zoom transition", "tags": ["fractal", "zoom", "animation"], "is_interactive": False, "source_project": "geometry", "source_file": "library/geometry/index.tsx", "preview_size": "fullscreen"},

    # Artist Studio
    {"id": "color-palette", "name": "Color Palette", "zone": "artist-studio", "categories": ["inputs"], "description": "Paint-daub color picker", "tags": ["color", "picker", "input"], "is_interactive": True, "source_project": "artist-studio", "source_file": "library/artist-studio/index.tsx", "preview_size": "medium"},
    {"id": "polaroid-developer", "name": "Polaroid Developer", "zone": "artist-studio", "categories": ["cards", "transitions"], "description": "Photo card that develops like a Polaroid", "tags": ["card", "photo", "reveal"], "is_interactive": True, "source_project": "artist-studio", "source_file": "library/artist-studio/index.tsx", "preview_size": "medium"},
]
