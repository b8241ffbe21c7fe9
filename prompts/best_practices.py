"""Platform and content-type best practices.

Static knowledge injected into content prompts and served by
/api/best-practices. Lookups fall back to a generic table so every
platform and content type gets something usable.
"""

from __future__ import annotations

import re
from datetime import datetime

PLATFORM_SECTIONS = [
    ("content_formats", "Top-Performing Content Formats"),
    ("engagement_tactics", "Engagement Optimization Tactics"),
    ("algorithm_considerations", "Algorithm Considerations"),
    ("optimal_timing", "Optimal Posting Strategy"),
    ("visual_elements", "Visual Elements That Stop Scrolling"),
    ("caption_structure", "Effective Caption/Content Structure"),
    ("trending_formats", "Trending Content Formats ({year})"),
]

CONTENT_TYPE_SECTIONS = [
    ("structure", "Effective Structure Elements"),
    ("optimizations", "Content Optimization Strategies"),
    ("engagement", "Engagement Maximization Techniques"),
    ("technical", "Technical Considerations"),
    ("trends", "Trending Approaches"),
]

PLATFORM_BEST_PRACTICES: dict[str, dict[str, list[str]]] = {
    "facebook": {
        "content_formats": [
            "Short-form video (60-90 seconds) optimized for mobile viewing",
            "Carousel posts for storytelling with multiple images",
            "Text-based posts with strong questions to drive comments",
            "Live video sessions for Q&A and direct engagement",
        ],
        "engagement_tactics": [
            "Ask specific questions in the first 2 lines of text",
            "Share relatable stories that encourage others to share theirs",
            "Create content that sparks debate (but avoid controversial topics)",
            "Use 'comment below' CTAs combined with a specific prompt",
        ],
        "algorithm_considerations": [
            "Meaningful interactions are weighted most heavily (comments > shares > reactions)",
            "Content that keeps users on Facebook receives algorithmic preference",
            "Posts that generate back-and-forth conversations get the most reach",
            "Native content (posted directly to Facebook) performs better than external links",
        ],
        "optimal_timing": [
            "Tuesday-Thursday between 8-9am and 1-3pm",
            "3-5 posts weekly for optimal engagement without audience fatigue",
            "Space posts at least 24 hours apart",
            "Test posting when competition is lowest (often early morning or late evening)",
        ],
        "visual_elements": [
            "Square (1:1) or vertical (4:5) video formats perform 78% better than landscape",
            "High contrast colors that stand out in a crowded feed",
            "Human faces increase engagement by 38%",
            "Text overlay should be limited to 20% of image area",
        ],
        "caption_structure": [
            "Front-load key message in first 5-10 words",
            "Keep most important content above the 'See more' cutoff",
            "Use line breaks for readability (avoid text walls)",
            "Consider emoji use for visual breaks (but don't overuse)",
        ],
        "trending_formats": [
            "Story-driven carousel posts with swipe-worthy content",
            "POV-style videos showing transformation or before/after",
            "Authentic behind-the-scenes content that humanizes brands",
            "Quick tip/hack videos delivering immediate value",
        ],
    },
    "instagram": {
        "content_formats": [
            "Reels (7-15 seconds) with hook in first 1-2 seconds",
            "Carousel posts with educational content (6-10 slides optimal)",
            "Behind-the-scenes authentic content that humanizes brand/creator",
            "User-generated content repurposed with permission",
        ],
        "engagement_tactics": [
            "Use calls-to-action that encourage saving content (bookmarks)",
            "Create carousel posts with value worth saving for later",
            "Ask questions that prompt more than one-word answers",
            "Create content worth sharing to Stories (value, humor, or inspiration)",
        ],
        "algorithm_considerations": [
            "Save rate is now the strongest engagement signal (saves > shares > comments > likes)",
            "Content natively created in Instagram receives preferential distribution",
            "Consistent posting across formats (Feed, Stories, Reels) increases overall visibility",
            "Engagement in first 60 minutes heavily influences reach",
        ],
        "optimal_timing": [
            "Tuesday, Wednesday, Thursday 11am-1pm and 7-9pm",
            "Weekends show higher engagement for lifestyle content",
            "Feed posts: 4-7 weekly for optimal growth",
            "Stories: 3-7 daily with interactive elements",
        ],
        "visual_elements": [
            "Vertical video (9:16) performs 30% better than square formats",
            "Bright, high-contrast imagery stops scrolling",
            "Clean, minimalist aesthetic with focused subject matter",
            "Consistent visual identity across posts (color palette, filters)",
        ],
        "caption_structure": [
            "Optimal caption length: 138-150 characters for highest engagement",
            "Place most important content in first line before 'More' cutoff",
            "Use line breaks generously for readability",
            "Hashtag strategy: 5-9 relevant tags perform better than maximum 30",
        ],
        "trending_formats": [
            "Quick tutorial Reels with clear steps",
            "Day-in-the-life content showing authentic moments",
            "Aesthetic transformation videos (before/during/after)",
            "Educational carousel posts with save-worthy information",
        ],
    },
    "linkedin": {
        "content_formats": [
            "Text-only posts with personal stories + business lessons",
            "Document/PDF carousel posts (5-8 slides)",
            "Short-form video (30-90 seconds) with professional insights",
            "Polls and surveys to drive engagement and gather insights",
        ],
        "engagement_tactics": [
            "Ask thought-provoking questions that showcase expertise",
            "Share personal failures/lessons that led to professional growth",
            "Create 'hot take' content that challenges conventional wisdom",
            "Tag relevant connections (sparingly) to extend reach",
        ],
        "algorithm_considerations": [
            "Initial engagement window (first 2 hours) determines broader distribution",
            "Comments from outside your network boost content visibility significantly",
            "Personal accounts receive approximately 30% higher reach than company pages",
            "Dwell time (how long people view your content) impacts algorithm",
        ],
        "optimal_timing": [
            "Tuesday, Wednesday, Thursday 9-11am and 1-3pm",
            "2-5 posts weekly for professional audiences",
            "Early week posts (Monday/Tuesday) perform better for business content",
            "Engaging with commenters within 60 minutes increases visibility",
        ],
        "visual_elements": [
            "Professional-quality images that aren't stock photos",
            "Data visualizations and graphs (simple and clear)",
            "Text overlay should be minimal and readable at a glance",
            "Visual hierarchy with clear focal points",
        ],
        "caption_structure": [
            "Posts between 1,300-1,600 characters with key points in first 210 characters",
            "Problem-solution-outcome format for highest engagement",
            "Use line breaks and bullet points for scannable content",
            "Avoid hyperlinking in initial post (add links in comments instead)",
        ],
        "trending_formats": [
            "Contrarian viewpoints on established business practices",
            "Document posts showing frameworks and methodologies",
            "Personal narrative + professional insight format",
            "Expert roundups and collaborative content",
        ],
    },
    "twitter": {
        "content_formats": [
            "Tweet threads (4-7 tweets) for in-depth topics",
            "Single tweets with strong hooks and clear value",
            "Poll tweets to drive engagement and gather insights",
            "Visual tweets with infographics or data visualizations",
        ],
        "engagement_tactics": [
            "Ask specific questions that require thoughtful responses",
            "Share controversial (but not offensive) opinions",
            "Create open-ended prompts that invite diverse answers",
            "Reply to commenters quickly to boost conversation ranking",
        ],
        "algorithm_considerations": [
            "Reply-to-impression ratio is the strongest engagement signal",
            "Content generating multi-person conversations receives extended visibility",
            "Time spent viewing before engagement impacts future content distribution",
            "Threads perform better than extremely long single tweets",
        ],
        "optimal_timing": [
            "Wednesday and Thursday 9am-11am and 1pm-3pm",
            "2-5 tweets daily for sustained visibility",
            "Spacing tweets at least 1-2 hours apart",
            "Real-time engagement with trending topics (within 10-15 minutes)",
        ],
        "visual_elements": [
            "Optimal image ratio: 1.91:1 (1200x628px)",
            "Bold, attention-grabbing visuals with minimal text",
            "GIFs receive 55% more engagement than static images",
            "Charts and data visualizations for credibility",
        ],
        "caption_structure": [
            "Front-load value in first 45 characters (visible without expanding)",
            "Use line breaks sparingly but strategically",
            "Include relevant hashtags (1-2 maximum) within sentence structure",
            "End with clear CTA or question to prompt responses",
        ],
        "trending_formats": [
            "Insight-driven threads with numbered points",
            "Hot takes and contrarian viewpoints",
            "Real-time commentary on industry news",
            "Visual tweets breaking down complex concepts",
        ],
    },
    "tiktok": {
        "content_formats": [
            "Hook-driven content with clear value proposition in first 2-3 seconds",
            "Storytelling format with conflict-resolution structure",
            "Educational content revealing 'insider' information",
            "Trend participation with unique twist related to brand/niche",
        ],
        "engagement_tactics": [
            "Create content that prompts 'stitch' or 'duet' responses",
            "Ask viewers to comment with specific answers or experiences",
            "Use text overlay to pose questions that drive comments",
            "Create 'part 1' content that builds anticipation for follow-ups",
        ],
        "algorithm_considerations": [
            "Watch time percentage is weighted more heavily than total views",
            "Video completion rate significantly impacts distribution",
            "Content with strong audience retention (low drop-off) gets boosted",
            "First video performance heavily influences subsequent video reach",
        ],
        "optimal_timing": [
            "Tuesday through Saturday, 7-9pm local time",
            "1-3 videos daily for maximum algorithm favor",
            "Morning posts (6-9am) for business/educational content",
            "Evening posts (7-10pm) for entertainment content",
        ],
        "visual_elements": [
            "Vertical video (9:16) using full screen canvas",
            "High-contrast visuals with movement that captures attention",
            "Text placement in middle 70% of screen for maximum readability",
            "Quick cuts/transitions every 2-3 seconds to maintain interest",
        ],
        "caption_structure": [
            "Keep captions short and punchy (under 150 characters)",
            "Use only 2-3 highly relevant hashtags",
            "Place hook question in caption to drive engagement",
            "End with clear CTA (comment, follow, share)",
        ],
        "trending_formats": [
            "POV/character-based short narratives",
            "Transition reveals showing transformation",
            "Quick educational content framed as 'things I wish I knew'",
            "Behind-the-scenes authentic glimpses of processes",
        ],
    },
    "market-analysis": {
        "content_formats": [
            "Comprehensive market size and growth metrics with 3-5 year projections",
            "Segment analysis breaking down market by relevant categories",
            "Competitive landscape overview with market share distribution",
            "Trend analysis with supporting data from multiple sources",
            "Geographic breakdown of market performance by region",
        ],
        "engagement_tactics": [
            "Begin with 1-2 unexpected findings that challenge conventional wisdom",
            "Include direct quotes from industry experts to add credibility",
            "Use clear comparative analyses (e.g., year-over-year, competitor vs. competitor)",
            "Incorporate voice-of-customer data to humanize market statistics",
            "Present both opportunities and threats in balanced analysis",
        ],
        "algorithm_considerations": [
            "Organize data to support skimmable content consumption",
            "Design for both digital viewing and potential printing",
            "Ensure all charts and graphs are accessible and understandable",
            "Structure content for both executive and detailed reading levels",
            "Include linkable sections for easy reference and sharing",
        ],
        "optimal_timing": [
            "Quarterly updates to maintain relevance in fast-changing markets",
            "Annual comprehensive reports with detailed analysis",
            "Release timing aligned with industry fiscal reporting periods",
            "Strategic timing around major industry events or announcements",
            "Long-form reports released early in business week (Mon-Tues)",
        ],
        "visual_elements": [
            "Market share pie charts with competitor breakdown",
            "Line graphs showing market trends over 3-5 year periods",
            "Heat maps for geographic market intensity visualization",
            "Comparison tables with color-coding for quick insights",
            "Infographics summarizing key market dynamics",
        ],
        "caption_structure": [
            "Clear, descriptive chart titles that communicate the main finding",
            "Concise data source citations directly under visualizations",
            "Explanatory captions highlighting 1-2 key insights from each figure",
            "Consistent formatting for all figure captions and references",
            "Limited jargon with clear explanations when necessary",
        ],
        "trending_formats": [
            "Interactive dashboards allowing stakeholders to explore data dimensions",
            "AI-enhanced predictive modeling with multiple scenarios",
            "Integration of real-time market data with historical trends",
            "Mobile-optimized reports with responsive visualizations",
            "Executive summaries with embedded micro-videos explaining key findings",
        ],
    },
    "competitor-research": {
        "content_formats": [
            "SWOT analysis for each major competitor",
            "Competitive positioning matrix with clear differentiation factors",
            "Detailed product/service comparison matrices",
            "Pricing strategy analysis with market positioning",
            "Digital presence and marketing strategy evaluation",
        ],
        "engagement_tactics": [
            "Start with actionable intelligence that can drive immediate decisions",
            "Include competitive response scenarios to potential strategies",
            "Provide clear opportunity gaps identified through competitor weaknesses",
            "Analyze competitor messaging and value propositions",
            "Include voice-of-customer feedback about competitor offerings",
        ],
        "algorithm_considerations": [
            "Structure content for different stakeholder needs (executive, marketing, product)",
            "Include executive summary with key actionable insights",
            "Ensure all comparisons use consistent metrics and evaluation criteria",
            "Design for both presentation and detailed reference formats",
            "Include linkable sections for team collaboration and discussion",
        ],
        "optimal_timing": [
            "Quarterly core competitor updates",
            "Monthly tracking of fast-moving competitive metrics",
            "Rapid analysis following competitor product launches or announcements",
            "Annual comprehensive competitive landscape review",
            "Pre-strategic planning cycle comprehensive analysis",
        ],
        "visual_elements": [
            "Competitive positioning quadrant/matrix diagrams",
            "Radar/spider charts for multi-factor competitor comparisons",
            "Side-by-side visual product/feature comparisons",
            "Trend lines showing competitor performance over time",
            "Market share visualization with competitor breakdown",
        ],
        "caption_structure": [
            "Objective, fact-based descriptions avoiding subjective language",
            "Clear methodology notes for how comparisons were developed",
            "Data sources and time periods clearly labeled",
            "Highlighting of significant gaps or advantages",
            "Consistent formatting for competitor names and attributes",
        ],
        "trending_formats": [
            "Dynamic competitor tracking dashboards with real-time updates",
            "AI-powered sentiment analysis of competitor customer feedback",
            "Scenario planning tools showing potential competitor responses",
            "Integrated competitive intelligence with internal strategic planning",
            "Video breakdowns of competitor product features and experiences",
        ],
    },
    "industry-trends": {
        "content_formats": [
            "Emerging technology impact analysis",
            "Regulatory environment changes and implications",
            "Consumer behavior shift analysis with supporting data",
            "Supply chain and operational trend evaluation",
            "Cross-industry convergence and disruption potential",
        ],
        "engagement_tactics": [
            "Open with most disruptive or surprising trend findings",
            "Include expert opinions from diverse industry perspectives",
            "Provide concrete examples of trends in action at leading companies",
            "Analyze potential business model implications of each trend",
            "Include clear timeline projections for trend development",
        ],
        "algorithm_considerations": [
            "Structure content to be valuable for 6-12 month strategic planning",
            "Include both short-term actionable insights and long-term strategic considerations",
            "Design for presentation sharing in executive settings",
            "Include search-optimized section headers for reference",
            "Structure content for both detailed reading and quick scanning",
        ],
        "optimal_timing": [
            "Quarterly trend updates with fresh analysis",
            "Annual comprehensive trend forecasts",
            "Release aligned with industry planning cycles",
            "Post-major industry event analysis and implications",
            "Strategic timing before annual planning processes",
        ],
        "visual_elements": [
            "Trend impact matrices showing business implications",
            "Adoption curve projections for emerging technologies",
            "Heat maps showing trend intensity across industry segments",
            "Timeline visualizations for trend development stages",
            "Comparative visualizations of trend implications across business functions",
        ],
        "caption_structure": [
            "Forward-looking statements with clear timeframe references",
            "Multiple scenario descriptions when future outcomes are uncertain",
            "Clear distinction between established and emerging trends",
            "Methodology and confidence level indicators for projections",
            "Sources and data collection periods clearly identified",
        ],
        "trending_formats": [
            "Scenario planning frameworks with multiple potential futures",
            "Interactive trend impact calculators",
            "Video interviews with industry thought leaders",
            "Real-time trend monitoring dashboards",
            "Quarterly webinars presenting updated trend analysis",
        ],
    },
    "consumer-insights": {
        "content_formats": [
            "Demographic and psychographic segmentation analysis",
            "Customer journey mapping with pain points and opportunities",
            "Voice-of-customer research with representative quotes",
            "Purchase decision factor analysis and prioritization",
            "Behavioral data analysis with clear patterns identified",
        ],
        "engagement_tactics": [
            "Begin with most surprising or counter-intuitive consumer findings",
            "Include direct customer quotes that illuminate key insights",
            "Provide clear personas with actionable characteristics",
            "Connect insights directly to product/service opportunities",
            "Show before/after potential based on insight implementation",
        ],
        "algorithm_considerations": [
            "Structure for multiple stakeholder needs (marketing, product, executive)",
            "Include both quantitative data and qualitative insights",
            "Design for presentation in strategic planning sessions",
            "Ensure privacy compliance in all customer data presented",
            "Include search-optimized section headers for reference",
        ],
        "optimal_timing": [
            "Quarterly deep-dive into specific customer segments",
            "Annual comprehensive customer landscape analysis",
            "Post-major product launch customer feedback analysis",
            "Pre-strategic planning cycle insights compilation",
            "Seasonal analysis for cyclical purchasing behaviors",
        ],
        "visual_elements": [
            "Customer persona profiles with key attributes",
            "Journey maps showing emotional states and touch points",
            "Decision factor importance matrices",
            "Sentiment analysis visualizations across touchpoints",
            "Comparative visualizations between customer segments",
        ],
        "caption_structure": [
            "Clear methodology notes for data collection",
            "Sample sizes and statistical confidence indicators",
            "Time periods for data collection clearly stated",
            "Demographic information for quoted customers (anonymized)",
            "Context information for customer quotes and feedback",
        ],
        "trending_formats": [
            "Interactive customer journey tools showing multidimensional data",
            "Video ethnography highlights with customer permission",
            "AI-powered sentiment analysis of customer feedback",
            "Real-time customer feedback dashboards",
            "Longitudinal studies showing changing customer preferences",
        ],
    },
    "academic-research": {
        "content_formats": [
            "Literature review with comprehensive citation analysis",
            "Methodology section with detailed research design",
            "Statistical analysis with significance testing",
            "Discussion section connecting findings to existing theory",
            "Future research directions with specific hypotheses",
        ],
        "engagement_tactics": [
            "Begin with clear research questions and their significance",
            "Include limitations section showing scientific rigor",
            "Reference seminal works in the field for credibility",
            "Connect abstract findings to practical implications",
            "Provide clear definitions of specialized terminology",
        ],
        "algorithm_considerations": [
            "Structure for both academic and practitioner audiences",
            "Include abstracts of different lengths (short and comprehensive)",
            "Design for both digital database indexing and print publication",
            "Include keywords optimized for academic database discovery",
            "Structure for citation and reference by other researchers",
        ],
        "optimal_timing": [
            "Submission timing aligned with academic conference cycles",
            "Publication timing considering peer review processes",
            "Strategic release to coincide with related policy discussions",
            "Timing considering academic year and teaching cycles",
            "Release before grant funding cycles when applicable",
        ],
        "visual_elements": [
            "Statistical output tables formatted for academic standards",
            "Conceptual models showing relationships between variables",
            "Process diagrams for methodological clarity",
            "Data visualization adhering to scientific publication standards",
            "Citation network visualizations showing research positioning",
        ],
        "caption_structure": [
            "Precise technical language following field conventions",
            "Statistical notation following APA or field-specific guidelines",
            "Detailed methodological notes for replicability",
            "Variable definitions and measurement approaches",
            "Statistical significance indicators following conventions",
        ],
        "trending_formats": [
            "Open science approaches with data and code repositories",
            "Preregistration of research protocols and hypotheses",
            "Mixed methods approaches combining qualitative and quantitative insights",
            "Interdisciplinary research spanning multiple domains",
            "Participatory research involving stakeholders throughout process",
        ],
    },
}

GENERIC_PLATFORM_PRACTICES: dict[str, list[str]] = {
    "content_formats": [
        "Short-form video (under 90 seconds) optimized for mobile viewing",
        "Carousel/swipeable content for multi-part information",
        "Text-based posts with strong questions to drive comments",
        "Live video sessions for direct audience engagement",
    ],
    "engagement_tactics": [
        "Ask specific questions that encourage detailed responses",
        "Share authentic, relatable stories that prompt others to share",
        "Create content worth saving for later reference",
        "Use clear calls-to-action directing audience interaction",
    ],
    "algorithm_considerations": [
        "Active engagement (comments, saves, shares) outweighs passive engagement (likes, views)",
        "Content that keeps users on-platform receives preferential treatment",
        "Early engagement velocity impacts overall reach",
        "Native content outperforms external links across all platforms",
    ],
    "optimal_timing": [
        "Tuesday through Thursday tend to show highest engagement",
        "Midday (11am-2pm) and evening (7-9pm) typically perform best",
        "Consistent posting schedule increases average engagement",
        "Platform-native scheduling tools often receive algorithmic preference",
    ],
    "visual_elements": [
        "Vertical (9:16) or square (1:1) formats optimize for mobile viewing",
        "High contrast visuals with clear focal points stop scrolling",
        "Human faces and expressions increase engagement across platforms",
        "Text overlay should be minimal and readable at a glance",
    ],
    "caption_structure": [
        "Front-load key message in first sentence before any cutoff",
        "Use line breaks strategically to improve readability",
        "Include one clear call-to-action per post",
        "Balance informative and conversational tones",
    ],
    "trending_formats": [
        "Authentic, behind-the-scenes content that humanizes brands",
        "Educational quick-tips providing immediate value",
        "Narrative-driven content with clear story arcs",
        "Interactive content that prompts audience participation",
    ],
}

CONTENT_TYPE_BEST_PRACTICES: dict[str, dict[str, list[str]]] = {
    "blog-post": {
        "structure": [
            "Use H2 and H3 headings to create a clear hierarchy (improves both readability and SEO)",
            "Optimal length: 1,500-2,500 words for comprehensive guides, 750-1,200 for standard posts",
            "Include a compelling introduction that states the problem and promises a solution",
            "Break content into scannable sections with descriptive subheadings",
            "End with a conclusion that summarizes key points and includes a clear call to action",
        ],
        "optimizations": [
            "Include primary keyword in title, first paragraph, and at least one H2",
            "Use semantic keywords throughout to improve topical relevance",
            "Optimize meta description with a clear value proposition (150-155 characters)",
            "Include internal links to 3-5 relevant pages on your site",
            "Add optimized alt text to all images (include keywords where natural)",
        ],
        "engagement": [
            "Address reader directly using 'you' language to create connection",
            "Include relevant statistics and research to build credibility",
            "Add visual elements every 300-350 words (images, charts, videos)",
            "Use storytelling elements to make complex information relatable",
            "Include questions throughout to prompt reader reflection",
        ],
        "technical": [
            "Ensure mobile-friendly formatting with short paragraphs (3-4 lines max)",
            "Optimize image file sizes for fast loading (under 200KB per image)",
            "Use descriptive anchor text for all links",
            "Include schema markup for better search visibility",
            "Ensure reading level is appropriate (aim for 7th-9th grade for general audience)",
        ],
        "trends": [
            "Expert roundups featuring multiple perspectives on a topic",
            "Interactive elements (quizzes, calculators, assessments)",
            "Data visualization of complex information",
            "Original research or surveys with unique insights",
            "Comprehensive 'ultimate guides' that thoroughly cover a topic",
        ],
    },
    "email": {
        "structure": [
            "Concise, benefit-focused subject line (6-10 words optimal)",
            "Personalized greeting using recipient's name",
            "Clear, single-focus main message in first paragraph",
            "Scannable bullet points for key information",
            "Single, prominent call-to-action button",
        ],
        "optimizations": [
            "Optimize preview text with compelling hook (40-130 characters)",
            "Use responsive design templates that work on all devices",
            "Maintain text-to-image ratio of 60:40 to avoid spam filters",
            "Keep email width between 600-640px for optimal display",
            "Include plain-text version alongside HTML for deliverability",
        ],
        "engagement": [
            "Focus on one clear goal per email (don't try to accomplish multiple objectives)",
            "Use casual, conversational tone that sounds human",
            "Include social proof elements (testimonials, reviews, case studies)",
            "Ask questions to prompt mental engagement",
            "Create urgency with time-limited offers or deadlines",
        ],
        "technical": [
            "Test emails across multiple devices and email clients before sending",
            "Include alt text for all images",
            "Use web-safe fonts for consistent display",
            "Optimize for dark mode compatibility",
            "Include unsubscribe link and physical address for CAN-SPAM compliance",
        ],
        "trends": [
            "Interactive elements (AMP for email, quizzes, polls)",
            "User-generated content spotlights",
            "Personalized product recommendations based on behavior",
            "Minimalist design with focused messaging",
            "AI-powered send time optimization for individual recipients",
        ],
    },
    "video-script": {
        "structure": [
            "Attention-grabbing hook in first 5-7 seconds",
            "Clear explanation of value proposition by 15-second mark",
            "Problem-solution-benefit structure for main content",
            "Strategic pattern interrupts every 40-60 seconds",
            "Strong call to action in final 10-15 seconds",
        ],
        "optimizations": [
            "Script for natural, conversational delivery (150-170 words per minute)",
            "Include visual direction notes for key moments",
            "Front-load key information for audience retention",
            "Build in organic transitions between points",
            "Script for both audio and visual elements simultaneously",
        ],
        "engagement": [
            "Address viewer directly using 'you' language",
            "Include open-ended questions to prompt viewer thought",
            "Use storytelling elements to illustrate key points",
            "Script moments of authentic emotion/reaction",
            "Include specific prompts for engagement (like, comment, subscribe)",
        ],
        "technical": [
            "Script should note on-screen text for key points",
            "Include visual transitions and B-roll opportunities",
            "Note audio considerations (music, sound effects, tone shifts)",
            "Script with mobile viewing in mind (close-ups, large text)",
            "Include caption notes for accessibility",
        ],
        "trends": [
            "Pattern interrupts using visual/audio transitions",
            "Data visualization of complex information",
            "Authentic, behind-the-scenes moments",
            "'Day in the life' perspective formats",
            "Tutorial-style content with clear step-by-step instructions",
        ],
    },
    "cold-outreach-email": {
        "structure": [
            "Problem-focused subject line that avoids spam triggers (avoid ALL CAPS, excessive punctuation)",
            "Short, personalized greeting that doesn't feel templated",
            "Opening that immediately addresses a pain point the recipient likely has",
            "3-5 concise bullet points highlighting key benefits (not features)",
            "Single, low-commitment call to action (reply or brief consultation rather than purchase)",
        ],
        "optimizations": [
            "Keep total length under 200 words for higher response rates",
            "Frontload value in the first 2-3 sentences (most important content first)",
            "Use language that focuses on the recipient, not yourself (more 'you', less 'we/I')",
            "Include specific numbers and data points to build credibility",
            "Optimize send time for business emails (Tuesday-Thursday, 10am-2pm)",
        ],
        "engagement": [
            "Use questions that prompt the recipient to reflect on their current situation",
            "Include a brief success story or case study relevant to recipient's industry",
            "Address potential objections before they arise",
            "Use a friendly, helpful tone rather than salesy language",
            "Offer genuine value before asking for anything in return",
        ],
        "technical": [
            "Ensure the email passes spam filter tests (avoid trigger words like 'free', 'guarantee', etc.)",
            "Use a professional email signature with minimal contact options",
            "Keep paragraphs to 1-3 lines for mobile readability",
            "Minimize images to ensure deliverability",
            "Test your subject line with tools like SubjectLine.com before sending",
        ],
        "trends": [
            "Hyper-personalized outreach based on recent recipient activity or news",
            "Video thumbnails in email that link to personalized video messages",
            "Two-sentence email approach for initial contact (ultra-brevity)",
            "Pattern interrupt techniques that stand out from standard templates",
            "Sequential nurturing emails that build relationship before making asks",
        ],
    },
    "research-report": {
        "structure": [
            "Include an executive summary (250-350 words) that highlights key findings and implications",
            "Use a clear hierarchy with H1, H2, and H3 headings to organize information logically",
            "Structure content with a methodology section describing research approach",
            "Include data visualization for complex information (charts, graphs, tables)",
            "Close with actionable recommendations and concrete next steps",
        ],
        "optimizations": [
            "Use descriptive section headers that communicate key findings",
            "Structure content for both skimming (executive summary, section headers) and deep reading",
            "Include a table of contents for reports longer than 10 pages",
            "Add page numbers and proper citations for all data sources",
            "Ensure consistent formatting of similar elements throughout (tables, charts, figures)",
        ],
        "engagement": [
            "Begin each section with the most important finding or implication",
            "Use real-world examples and case studies to illustrate key points",
            "Incorporate visual elements every 2-3 pages to break up text",
            "Highlight unexpected or counterintuitive findings to maintain interest",
            "Include expert quotes or insights to add authority and perspective",
        ],
        "technical": [
            "Create a responsive design that works on both desktop and mobile devices",
            "Ensure charts and graphs are readable at different screen sizes",
            "Include alternative text for all visual elements for accessibility",
            "Use consistent typography hierarchy throughout the document",
            "Design with both digital viewing and potential printing in mind",
        ],
        "trends": [
            "Interactive data visualizations allowing readers to explore findings",
            "Integration of primary research with AI-powered market analysis",
            "Scenario modeling showing multiple potential outcomes",
            "Benchmarking against industry standards with clear visual indicators",
            "Dynamic reports that can be filtered by the reader for personalized insights",
        ],
    },
}

GENERIC_CONTENT_PRACTICES: dict[str, list[str]] = {
    "structure": [
        "Start with a compelling headline or title",
        "Include a clear introduction that states the purpose",
        "Organize main content in logical sections",
        "Use visual elements to enhance understanding",
        "End with a clear conclusion and next steps",
    ],
    "optimizations": [
        "Focus on audience-specific needs and pain points",
        "Use clear, concise language appropriate to audience",
        "Incorporate relevant keywords naturally",
        "Include credibility elements (data, experts, testimonials)",
        "Optimize for the platform where content will be published",
    ],
    "engagement": [
        "Address audience directly using 'you' language",
        "Ask questions to prompt reflection and interaction",
        "Tell stories that illustrate key points",
        "Use examples relevant to your specific audience",
        "Include a clear call to action",
    ],
    "technical": [
        "Ensure content is accessible to all users",
        "Optimize for mobile viewing experience",
        "Use proper formatting for readability",
        "Include metadata for better discoverability",
        "Test content on multiple devices before publishing",
    ],
    "trends": [
        "Personalized content tailored to specific audience segments",
        "Interactive elements that encourage participation",
        "Visual storytelling components",
        "Data-driven insights and analysis",
        "Authentic, transparent messaging",
    ],
}


def get_platform_best_practices(platform: str) -> dict[str, list[str]]:
    return PLATFORM_BEST_PRACTICES.get(platform.lower(), GENERIC_PLATFORM_PRACTICES)


def get_content_type_best_practices(content_type: str) -> dict[str, list[str]]:
    key = re.sub(r"[^a-z-]", "", content_type.lower())
    return CONTENT_TYPE_BEST_PRACTICES.get(key, GENERIC_CONTENT_PRACTICES)


def _format(heading: str, practices: dict[str, list[str]], sections, year: int) -> str:
    parts = [f"## {heading} ({year})"]
    for key, title in sections:
        items = "\n".join(f"- {item}" for item in practices[key])
        parts.append(f"### {title.format(year=year)}\n{items}")
    return "\n\n".join(parts) + "\n"


def format_platform_best_practices(platform: str) -> str:
    """Markdown block: '## Current Facebook Best Practices (2026)' plus seven sections."""
    year = datetime.now().year
    name = platform[:1].upper() + platform[1:]
    return _format(f"Current {name} Best Practices", get_platform_best_practices(platform), PLATFORM_SECTIONS, year)


def format_content_type_best_practices(content_type: str) -> str:
    year = datetime.now().year
    name = " ".join(word[:1].upper() + word[1:] for word in content_type.split("-"))
    return _format(
        f"Current {name} Best Practices",
        get_content_type_best_practices(content_type),
        CONTENT_TYPE_SECTIONS,
        year,
    )


def get_platform_quick_tips(platform: str) -> list[str]:
    """First item of every section, one tip per concern."""
    practices = get_platform_best_practices(platform)
    return [practices[key][0] for key, _ in PLATFORM_SECTIONS]


def get_content_type_quick_tips(content_type: str) -> list[str]:
    practices = get_content_type_best_practices(content_type)
    return [practices[key][0] for key, _ in CONTENT_TYPE_SECTIONS]
